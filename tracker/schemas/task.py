from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, model_validator

from tracker.models.enums import TaskPriority, TaskStatus
from tracker.models.task import Task
from tracker.schemas.common import ActorId
from tracker.validation import check_task_fields


class TaskCreateRequest(BaseModel):
    project_id: UUID
    title: str
    description: Optional[str] = None
    priority: TaskPriority = TaskPriority.MEDIUM
    assignee_id: Optional[ActorId] = None
    due_date: Optional[datetime] = None  # RFC 3339; naive values are read as UTC
    created_by: ActorId

    @model_validator(mode="after")
    def check_fields(self):
        error = check_task_fields(self.title, self.description)
        if error:
            raise ValueError(error)
        return self


class TaskUpdateRequest(BaseModel):
    """Full replacement of the mutable fields (PUT)"""
    title: str
    description: Optional[str] = None
    status: TaskStatus
    priority: TaskPriority
    assignee_id: Optional[ActorId] = None
    due_date: Optional[datetime] = None
    updated_by: ActorId


class TaskStatusUpdateRequest(BaseModel):
    status: TaskStatus
    updated_by: ActorId


class TaskPriorityUpdateRequest(BaseModel):
    priority: TaskPriority
    updated_by: ActorId


class TaskAssignRequest(BaseModel):
    assignee_id: Optional[ActorId] = None  # None = unassign
    updated_by: ActorId


class TaskDueDateRequest(BaseModel):
    due_date: Optional[datetime] = None  # None = clear
    updated_by: ActorId


class TaskResponse(BaseModel):
    id: UUID
    project_id: UUID
    title: str
    description: Optional[str] = None
    status: TaskStatus
    priority: TaskPriority
    assignee_id: Optional[str] = None
    due_date: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
    created_by: str
    updated_by: str
    is_completed: bool
    is_overdue: bool
    is_assigned: bool

    @classmethod
    def from_entity(cls, task: Task) -> "TaskResponse":
        return cls(
            **task.model_dump(),
            is_completed=task.is_completed,
            is_overdue=task.is_overdue,
            is_assigned=task.is_assigned,
        )


class TaskListResponse(BaseModel):
    project_id: UUID
    tasks: List[TaskResponse]
