"""FastAPI REST API for box design.

Usage:
    uvicorn boxforge.web:app --reload
"""

from boxforge.web.app import app, create_app

__all__ = ["app", "create_app"]
