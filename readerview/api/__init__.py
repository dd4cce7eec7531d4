"""FastAPI HTTP layer package.

Public re-export so callers can write::

    from readerview.api import app

    uvicorn readerview.api:app --reload
"""

from readerview.api.app import app

__all__ = ["app"]
