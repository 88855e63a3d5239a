from .base import ProjectRepository, TaskRepository
from .project_repository import SqlProjectRepository
from .task_repository import SqlTaskRepository

__all__ = [
    "ProjectRepository",
    "TaskRepository",
    "SqlProjectRepository",
    "SqlTaskRepository",
]
