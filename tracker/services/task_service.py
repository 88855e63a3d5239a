import logging
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from tracker.models.enums import TaskPriority, TaskStatus
from tracker.models.task import Task
from tracker.repositories.base import TaskRepository

logger = logging.getLogger(__name__)


class TaskService:
    """
    Task use cases on top of a TaskRepository.
    Every single-field change follows the same shape: load, mutate, persist,
    return the mutated task (not re-fetched).
    """

    def __init__(self, repository: TaskRepository):
        self.repository = repository

    async def get_task(self, task_id: UUID) -> Task:
        return await self.repository.get_by_id(task_id)

    async def get_tasks_by_project(self, project_id: UUID) -> List[Task]:
        return await self.repository.get_by_project(project_id)

    async def create_task(
        self,
        project_id: UUID,
        title: str,
        description: Optional[str],
        priority: TaskPriority,
        assignee_id: Optional[str],
        due_date: Optional[datetime],
        created_by: str,
    ) -> Task:
        task = Task.new(
            title,
            description,
            project_id,
            assignee_id,
            due_date,
            created_by,
            priority=priority,
        )
        await self.repository.create(task)
        logger.info(f"Task created: id={task.id}, project={project_id}")
        return task

    async def update_task(self, task: Task) -> None:
        # Check if task exists
        await self.repository.get_by_id(task.id)
        await self.repository.update(task)

    async def update_task_status(self, task_id: UUID, status: TaskStatus, updated_by: str) -> Task:
        task = await self.repository.get_by_id(task_id)
        task.update_status(status, updated_by)
        await self.repository.update(task)
        logger.info(f"Task {task_id} status -> {status.value} by {updated_by}")
        return task

    async def update_task_priority(self, task_id: UUID, priority: TaskPriority, updated_by: str) -> Task:
        task = await self.repository.get_by_id(task_id)
        task.update_priority(priority, updated_by)
        await self.repository.update(task)
        return task

    async def assign_task(self, task_id: UUID, assignee_id: Optional[str], updated_by: str) -> Task:
        task = await self.repository.get_by_id(task_id)
        task.assign_to(assignee_id, updated_by)
        await self.repository.update(task)
        return task

    async def set_task_due_date(self, task_id: UUID, due_date: Optional[datetime], updated_by: str) -> Task:
        task = await self.repository.get_by_id(task_id)
        task.set_due_date(due_date, updated_by)
        await self.repository.update(task)
        return task

    async def delete_task(self, task_id: UUID) -> None:
        # Check if task exists
        await self.repository.get_by_id(task_id)
        await self.repository.delete(task_id)
        logger.info(f"Task deleted: id={task_id}")
