"""
App assembly entry point.

Re-exports the FastAPI `app` from `realestate.api.main` so servers can be
started with ``uvicorn app:app``.
"""

from realestate.api.main import app  # noqa: F401
