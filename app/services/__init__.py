"""Services module"""

from app.services.task import TaskService

__all__ = [
    "TaskService",
]
