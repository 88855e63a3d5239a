"""
Repository contracts

Storage-agnostic interfaces for projects and tasks. Implementations raise
NotFoundError when an identified row does not exist and DatabaseError for any
storage failure.
"""
from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from tracker.models.project import Project
from tracker.models.task import Task


class ProjectRepository(ABC):

    @abstractmethod
    async def get_by_id(self, project_id: UUID) -> Project:
        """
        Raises:
            NotFoundError: no project with this id
        """

    @abstractmethod
    async def create(self, project: Project) -> None:
        """
        Insert a new row with every field of ``project``.

        Raises:
            DatabaseError: constraint violation (e.g. duplicate id)
        """

    @abstractmethod
    async def update(self, project: Project) -> None:
        """
        Overwrite the mutable fields and the audit pair.

        Raises:
            NotFoundError: zero rows affected
        """

    @abstractmethod
    async def delete(self, project_id: UUID) -> None:
        """
        Raises:
            NotFoundError: zero rows affected
        """


class TaskRepository(ABC):

    @abstractmethod
    async def get_by_id(self, task_id: UUID) -> Task:
        """
        Raises:
            NotFoundError: no task with this id
        """

    @abstractmethod
    async def get_by_project(self, project_id: UUID) -> List[Task]:
        """All tasks of a project, newest first. Empty list when there are none."""

    @abstractmethod
    async def create(self, task: Task) -> None:
        """
        Raises:
            DatabaseError: constraint violation (duplicate id, unknown project)
        """

    @abstractmethod
    async def update(self, task: Task) -> None:
        """
        Raises:
            NotFoundError: zero rows affected
        """

    @abstractmethod
    async def delete(self, task_id: UUID) -> None:
        """
        Raises:
            NotFoundError: zero rows affected
        """
