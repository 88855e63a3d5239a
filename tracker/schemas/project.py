from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, model_validator

from tracker.models.enums import ProjectStatus
from tracker.models.project import Project
from tracker.schemas.common import ActorId
from tracker.validation import check_project_fields


class ProjectCreateRequest(BaseModel):
    name: str
    description: Optional[str] = None
    owner_id: ActorId
    created_by: ActorId

    @model_validator(mode="after")
    def check_fields(self):
        error = check_project_fields(self.name, self.description)
        if error:
            raise ValueError(error)
        return self


class ProjectUpdateRequest(BaseModel):
    """Full replacement of the mutable fields (PUT)"""
    name: str
    description: Optional[str] = None
    status: ProjectStatus
    updated_by: ActorId


class ProjectDetailsUpdateRequest(BaseModel):
    """Partial rename/re-describe (PATCH); omitted fields are kept, a null description clears it"""
    name: Optional[str] = None
    description: Optional[str] = None
    updated_by: ActorId


class ProjectStatusUpdateRequest(BaseModel):
    status: ProjectStatus
    updated_by: ActorId


class ProjectResponse(BaseModel):
    id: UUID
    name: str
    description: Optional[str] = None
    status: ProjectStatus
    owner_id: str
    created_at: datetime
    updated_at: datetime
    created_by: str
    updated_by: str
    is_active: bool
    is_completed: bool

    @classmethod
    def from_entity(cls, project: Project) -> "ProjectResponse":
        return cls(
            **project.model_dump(),
            is_active=project.is_active,
            is_completed=project.is_completed,
        )
