"""
Project entity
A container of work. Mutated only through the named methods, each of which
refreshes the audit pair (updated_at / updated_by).
"""
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict

from tracker.models.enums import ProjectStatus
from tracker.utils.timezone import now_utc


class Project(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: UUID
    name: str
    description: Optional[str] = None
    status: ProjectStatus = ProjectStatus.ACTIVE
    owner_id: str
    created_at: datetime
    updated_at: datetime
    created_by: str
    updated_by: str

    @classmethod
    def new(
        cls,
        name: str,
        description: Optional[str],
        owner_id: str,
        created_by: str,
    ) -> "Project":
        now = now_utc()
        return cls(
            id=uuid4(),
            name=name,
            description=description,
            status=ProjectStatus.ACTIVE,
            owner_id=owner_id,
            created_at=now,
            updated_at=now,
            created_by=created_by,
            updated_by=created_by,
        )

    def _touch(self, updated_by: str) -> None:
        # never move backwards, even if the wall clock does
        self.updated_at = max(now_utc(), self.updated_at)
        self.updated_by = updated_by

    def update_name(self, name: str, updated_by: str) -> None:
        self.name = name
        self._touch(updated_by)

    def update_description(self, description: Optional[str], updated_by: str) -> None:
        self.description = description
        self._touch(updated_by)

    def update_status(self, status: ProjectStatus, updated_by: str) -> None:
        self.status = status
        self._touch(updated_by)

    @property
    def is_active(self) -> bool:
        return self.status == ProjectStatus.ACTIVE

    @property
    def is_completed(self) -> bool:
        return self.status == ProjectStatus.COMPLETED

    def __str__(self) -> str:
        return f"Project '{self.name}' [{self.status.label}] - {self.description or 'No description'}"
