# API module exports
from app.api import health, tasks
from app.api.base import api_router

__all__ = ["health", "tasks", "api_router"]
