"""REST API for shop floor planning.

Run with:
    uvicorn shopfloor.web.app:app --reload
"""

from shopfloor.web.app import create_app

__all__ = ["create_app"]
