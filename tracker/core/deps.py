from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from tracker.core.database import get_db
from tracker.repositories.project_repository import SqlProjectRepository
from tracker.repositories.task_repository import SqlTaskRepository
from tracker.services.project_service import ProjectService
from tracker.services.task_service import TaskService


async def get_project_service(db: AsyncSession = Depends(get_db)) -> ProjectService:
    return ProjectService(SqlProjectRepository(db))


async def get_task_service(db: AsyncSession = Depends(get_db)) -> TaskService:
    return TaskService(SqlTaskRepository(db))
