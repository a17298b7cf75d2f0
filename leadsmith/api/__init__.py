"""FastAPI HTTP layer package.

Public re-export so callers can write::

    from leadsmith.api import app

    uvicorn leadsmith.api:app --reload
"""

from leadsmith.api.app import app, create_app

__all__ = ["app", "create_app"]
