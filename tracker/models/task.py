"""
Task 엔티티
A unit of work inside a project.
"""
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict

from tracker.models.enums import TaskPriority, TaskStatus
from tracker.utils.timezone import ensure_utc, now_utc, to_utc_millis


class Task(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: UUID
    project_id: UUID
    title: str
    description: Optional[str] = None
    status: TaskStatus = TaskStatus.TODO
    priority: TaskPriority = TaskPriority.MEDIUM
    assignee_id: Optional[str] = None
    due_date: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
    created_by: str
    updated_by: str

    @classmethod
    def new(
        cls,
        title: str,
        description: Optional[str],
        project_id: UUID,
        assignee_id: Optional[str],
        due_date: Optional[datetime],
        created_by: str,
        priority: TaskPriority = TaskPriority.MEDIUM,
    ) -> "Task":
        now = now_utc()
        return cls(
            id=uuid4(),
            project_id=project_id,
            title=title,
            description=description,
            status=TaskStatus.TODO,
            priority=priority,
            assignee_id=assignee_id,
            due_date=to_utc_millis(due_date),
            created_at=now,
            updated_at=now,
            created_by=created_by,
            updated_by=created_by,
        )

    def _touch(self, updated_by: str) -> None:
        self.updated_at = max(now_utc(), self.updated_at)
        self.updated_by = updated_by

    def update_title(self, title: str, updated_by: str) -> None:
        self.title = title
        self._touch(updated_by)

    def update_description(self, description: Optional[str], updated_by: str) -> None:
        self.description = description
        self._touch(updated_by)

    def update_status(self, status: TaskStatus, updated_by: str) -> None:
        self.status = status
        self._touch(updated_by)

    def update_priority(self, priority: TaskPriority, updated_by: str) -> None:
        self.priority = priority
        self._touch(updated_by)

    def assign_to(self, assignee_id: Optional[str], updated_by: str) -> None:
        """Assign (or unassign with None)"""
        self.assignee_id = assignee_id
        self._touch(updated_by)

    def set_due_date(self, due_date: Optional[datetime], updated_by: str) -> None:
        self.due_date = to_utc_millis(due_date)
        self._touch(updated_by)

    @property
    def is_completed(self) -> bool:
        return self.status == TaskStatus.DONE

    @property
    def is_overdue(self) -> bool:
        if self.due_date is None:
            return False
        return ensure_utc(self.due_date) < datetime.now(timezone.utc) and not self.is_completed

    @property
    def is_assigned(self) -> bool:
        return self.assignee_id is not None

    def __str__(self) -> str:
        state = "OVERDUE" if self.is_overdue else "On track"
        return f"Task '{self.title}' [{self.status.label}] - Priority: {self.priority.label} - {state}"
