import logging
from typing import Any, Optional
from uuid import UUID

from tracker.models.enums import ProjectStatus
from tracker.models.project import Project
from tracker.repositories.base import ProjectRepository
from tracker.validation import validate_project

logger = logging.getLogger(__name__)

_KEEP = object()


class ProjectService:
    def __init__(self, repository: ProjectRepository):
        self.repository = repository

    async def get_project(self, project_id: UUID) -> Project:
        return await self.repository.get_by_id(project_id)

    async def create_project(
        self,
        name: str,
        description: Optional[str],
        owner_id: str,
        created_by: str,
    ) -> Project:
        project = Project.new(name, description, owner_id, created_by)
        await self.repository.create(project)
        logger.info(f"Project created: id={project.id}, owner={owner_id}")
        return project

    async def update_project(self, project: Project) -> None:
        # existence check, then write (not atomic: last write wins)
        await self.repository.get_by_id(project.id)
        await self.repository.update(project)

    async def update_project_status(
        self, project_id: UUID, status: ProjectStatus, updated_by: str
    ) -> Project:
        project = await self.repository.get_by_id(project_id)
        project.update_status(status, updated_by)
        await self.repository.update(project)
        logger.info(f"Project {project_id} status -> {status.value} by {updated_by}")
        return project

    async def update_project_details(
        self,
        project_id: UUID,
        updated_by: str,
        name: Optional[str] = None,
        description: Any = _KEEP,
    ) -> Project:
        """Rename and/or re-describe.

        An omitted field is kept; ``description=None`` clears the description.
        The result is validated before it is written.
        """
        project = await self.repository.get_by_id(project_id)
        if name is not None:
            project.update_name(name, updated_by)
        if description is not _KEEP:
            project.update_description(description, updated_by)
        validate_project(project)
        await self.repository.update(project)
        logger.info(f"Project {project_id} details updated by {updated_by}")
        return project

    async def delete_project(self, project_id: UUID) -> None:
        await self.repository.get_by_id(project_id)
        await self.repository.delete(project_id)
        logger.info(f"Project deleted: id={project_id}")
