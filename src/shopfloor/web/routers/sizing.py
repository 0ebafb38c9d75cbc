"""Engineering sizing endpoints."""

from fastapi import APIRouter

from shopfloor.domain.services.compressed_air import size_air_pipe
from shopfloor.domain.services.ducting import DustMachine, size_duct_branch, size_dust_system
from shopfloor.domain.services.electrical import CircuitLoad, size_electrical_circuit
from shopfloor.domain.value_objects import Phase
from shopfloor.web.schemas.requests import (
    AirSizingRequest,
    DuctSizingRequest,
    DustSystemRequest,
    ElectricalSizingRequest,
)
from shopfloor.web.schemas.responses import (
    AirSizingResponse,
    DuctBranchResponse,
    DustSystemResponse,
    ElectricalSizingResponse,
)

router = APIRouter(prefix="/sizing", tags=["sizing"])


@router.post("/electrical", response_model=ElectricalSizingResponse)
async def size_circuit(request: ElectricalSizingRequest) -> ElectricalSizingResponse:
    """Size conductor, breaker and conduit for one branch circuit.

    Loads beyond the largest standard wire or breaker return 422 with
    error_type "sizing".
    """
    load = CircuitLoad(
        volts=request.volts,
        amps=request.amps,
        phase=Phase(request.phase),
        power_factor=request.power_factor,
        is_motor=request.is_motor,
    )
    result = size_electrical_circuit(load, request.length_ft, max_drop_pct=request.max_drop_pct)
    return ElectricalSizingResponse.model_validate(result)


@router.post("/air", response_model=AirSizingResponse)
async def size_air_line(request: AirSizingRequest) -> AirSizingResponse:
    result = size_air_pipe(
        request.flow_scfm,
        request.pressure_psi,
        request.length_ft,
        max_drop_per_100ft=request.max_drop_per_100ft,
    )
    return AirSizingResponse.model_validate(result)


@router.post("/duct", response_model=DuctBranchResponse)
async def size_duct(request: DuctSizingRequest) -> DuctBranchResponse:
    result = size_duct_branch(request.cfm, run_length_ft=request.run_length_ft)
    return DuctBranchResponse.model_validate(result)


@router.post("/dust-system", response_model=DustSystemResponse)
async def size_dust_collection(request: DustSystemRequest) -> DustSystemResponse:
    """Size every branch, the main trunk and the collector."""
    machines = [DustMachine(name=m.name, cfm=m.cfm) for m in request.machines]
    result = size_dust_system(
        machines,
        simultaneous=request.simultaneous,
        main_run_length_ft=request.main_run_length_ft,
    )
    return DustSystemResponse.model_validate(result)
