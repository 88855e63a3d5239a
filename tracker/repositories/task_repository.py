from typing import List
from uuid import UUID

from sqlalchemy import delete, desc, insert, select, update

from tracker.core.exceptions import NotFoundError
from tracker.models.tables import TaskRecord
from tracker.models.task import Task
from tracker.repositories.base import TaskRepository
from tracker.repositories.sql_base import SqlAlchemyRepository


def _to_entity(record: TaskRecord) -> Task:
    return Task(
        id=UUID(record.id),
        project_id=UUID(record.project_id),
        title=record.title,
        description=record.description,
        status=record.status,
        priority=record.priority,
        assignee_id=record.assignee_id,
        due_date=record.due_date,
        created_at=record.created_at,
        updated_at=record.updated_at,
        created_by=record.created_by,
        updated_by=record.updated_by,
    )


class SqlTaskRepository(SqlAlchemyRepository, TaskRepository):

    async def get_by_id(self, task_id: UUID) -> Task:
        record = await self._fetch(
            select(TaskRecord).where(TaskRecord.id == str(task_id)),
            lambda result: result.scalar_one_or_none(),
        )
        if record is None:
            raise NotFoundError(f"Task {task_id} not found")
        return _to_entity(record)

    async def get_by_project(self, project_id: UUID) -> List[Task]:
        records = await self._fetch(
            select(TaskRecord)
            .where(TaskRecord.project_id == str(project_id))
            .order_by(desc(TaskRecord.created_at), desc(TaskRecord.id)),
            lambda result: result.scalars().all(),
        )
        return [_to_entity(record) for record in records]

    async def create(self, task: Task) -> None:
        await self._write(
            insert(TaskRecord).values(
                id=str(task.id),
                project_id=str(task.project_id),
                title=task.title,
                description=task.description,
                status=task.status,
                priority=task.priority,
                assignee_id=task.assignee_id,
                due_date=task.due_date,
                created_at=task.created_at,
                updated_at=task.updated_at,
                created_by=task.created_by,
                updated_by=task.updated_by,
            )
        )

    async def update(self, task: Task) -> None:
        rows_affected = await self._write(
            update(TaskRecord)
            .where(TaskRecord.id == str(task.id))
            .values(
                title=task.title,
                description=task.description,
                status=task.status,
                priority=task.priority,
                assignee_id=task.assignee_id,
                due_date=task.due_date,
                updated_at=task.updated_at,
                updated_by=task.updated_by,
            )
            .execution_options(synchronize_session=False)
        )
        if rows_affected == 0:
            raise NotFoundError(f"Task {task.id} not found")

    async def delete(self, task_id: UUID) -> None:
        rows_affected = await self._write(
            delete(TaskRecord)
            .where(TaskRecord.id == str(task_id))
            .execution_options(synchronize_session=False)
        )
        if rows_affected == 0:
            raise NotFoundError(f"Task {task_id} not found")
