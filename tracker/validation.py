"""
Structural checks for projects and tasks.

These are queries, not gates: constructors and mutators never call them, so an
entity can be built (or mutated) into an invalid state and rejected later by
whoever decides to validate it. ``check_*`` helpers return the first failure
message or ``None``; ``validate_*`` raise ``ValidationError`` with that message.
"""
from typing import Optional

from tracker.core.exceptions import ValidationError
from tracker.models.project import Project
from tracker.models.task import Task

PROJECT_NAME_MAX_LENGTH = 100
PROJECT_DESCRIPTION_MAX_LENGTH = 500
TASK_TITLE_MAX_LENGTH = 200
TASK_DESCRIPTION_MAX_LENGTH = 1000
# owner, assignee and audit actor identifiers
ACTOR_ID_MAX_LENGTH = 255


def check_project_fields(name: str, description: Optional[str]) -> Optional[str]:
    if not name.strip():
        return "Project name cannot be empty"
    if len(name) > PROJECT_NAME_MAX_LENGTH:
        return f"Project name cannot exceed {PROJECT_NAME_MAX_LENGTH} characters"
    if description is not None and len(description) > PROJECT_DESCRIPTION_MAX_LENGTH:
        return f"Project description cannot exceed {PROJECT_DESCRIPTION_MAX_LENGTH} characters"
    return None


def check_task_fields(title: str, description: Optional[str]) -> Optional[str]:
    if not title.strip():
        return "Task title cannot be empty"
    if len(title) > TASK_TITLE_MAX_LENGTH:
        return f"Task title cannot exceed {TASK_TITLE_MAX_LENGTH} characters"
    if description is not None and len(description) > TASK_DESCRIPTION_MAX_LENGTH:
        return f"Task description cannot exceed {TASK_DESCRIPTION_MAX_LENGTH} characters"
    return None


def validate_project(project: Project) -> None:
    error = check_project_fields(project.name, project.description)
    if error:
        raise ValidationError(error)


def validate_task(task: Task) -> None:
    error = check_task_fields(task.title, task.description)
    if error:
        raise ValidationError(error)
