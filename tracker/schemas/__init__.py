from .project import (
    ProjectCreateRequest,
    ProjectDetailsUpdateRequest,
    ProjectResponse,
    ProjectStatusUpdateRequest,
    ProjectUpdateRequest,
)
from .task import (
    TaskAssignRequest,
    TaskCreateRequest,
    TaskDueDateRequest,
    TaskListResponse,
    TaskPriorityUpdateRequest,
    TaskResponse,
    TaskStatusUpdateRequest,
    TaskUpdateRequest,
)

__all__ = [
    "ProjectCreateRequest",
    "ProjectUpdateRequest",
    "ProjectDetailsUpdateRequest",
    "ProjectStatusUpdateRequest",
    "ProjectResponse",
    "TaskCreateRequest",
    "TaskUpdateRequest",
    "TaskStatusUpdateRequest",
    "TaskPriorityUpdateRequest",
    "TaskAssignRequest",
    "TaskDueDateRequest",
    "TaskResponse",
    "TaskListResponse",
]
