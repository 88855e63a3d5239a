from .enums import ProjectStatus, TaskPriority, TaskStatus
from .project import Project
from .task import Task

__all__ = [
    "ProjectStatus",
    "TaskStatus",
    "TaskPriority",
    "Project",
    "Task",
]
