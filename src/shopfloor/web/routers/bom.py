"""Bill of materials endpoint."""

from fastapi import APIRouter

from shopfloor.domain.services.bom import BomConfig, BomSynthesizer, RoutingSegment
from shopfloor.domain.value_objects import Point3D
from shopfloor.web.schemas.requests import BomRequest
from shopfloor.web.schemas.responses import BomResponse

router = APIRouter(prefix="/bom", tags=["bom"])


@router.post("", response_model=BomResponse)
async def synthesize(request: BomRequest) -> BomResponse:
    """Aggregate routed runs into priced line items plus elbows."""
    segments = [
        RoutingSegment(
            id=s.id,
            start=Point3D(*s.start),
            end=Point3D(*s.end),
            system_type=s.system_type,
            diameter=s.diameter,
            gauge=s.gauge,
        )
        for s in request.segments
    ]
    report = BomSynthesizer(BomConfig(**request.options.model_dump())).synthesize(segments)
    return BomResponse.model_validate(report)
