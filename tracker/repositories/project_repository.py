from uuid import UUID

from sqlalchemy import delete, insert, select, update

from tracker.core.exceptions import NotFoundError
from tracker.models.project import Project
from tracker.models.tables import ProjectRecord
from tracker.repositories.base import ProjectRepository
from tracker.repositories.sql_base import SqlAlchemyRepository


def _to_entity(record: ProjectRecord) -> Project:
    return Project(
        id=UUID(record.id),
        name=record.name,
        description=record.description,
        status=record.status,
        owner_id=record.owner_id,
        created_at=record.created_at,
        updated_at=record.updated_at,
        created_by=record.created_by,
        updated_by=record.updated_by,
    )


class SqlProjectRepository(SqlAlchemyRepository, ProjectRepository):

    async def get_by_id(self, project_id: UUID) -> Project:
        record = await self._fetch(
            select(ProjectRecord).where(ProjectRecord.id == str(project_id)),
            lambda result: result.scalar_one_or_none(),
        )
        if record is None:
            raise NotFoundError(f"Project {project_id} not found")
        return _to_entity(record)

    async def create(self, project: Project) -> None:
        await self._write(
            insert(ProjectRecord).values(
                id=str(project.id),
                name=project.name,
                description=project.description,
                status=project.status,
                owner_id=project.owner_id,
                created_at=project.created_at,
                updated_at=project.updated_at,
                created_by=project.created_by,
                updated_by=project.updated_by,
            )
        )

    async def update(self, project: Project) -> None:
        rows_affected = await self._write(
            update(ProjectRecord)
            .where(ProjectRecord.id == str(project.id))
            .values(
                name=project.name,
                description=project.description,
                status=project.status,
                updated_at=project.updated_at,
                updated_by=project.updated_by,
            )
            .execution_options(synchronize_session=False)
        )
        if rows_affected == 0:
            raise NotFoundError(f"Project {project.id} not found")

    async def delete(self, project_id: UUID) -> None:
        rows_affected = await self._write(
            delete(ProjectRecord)
            .where(ProjectRecord.id == str(project_id))
            .execution_options(synchronize_session=False)
        )
        if rows_affected == 0:
            raise NotFoundError(f"Project {project_id} not found")
