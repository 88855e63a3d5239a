"""Entity construction, mutation and derived predicates."""
import time
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from tracker.models import Project, ProjectStatus, Task, TaskPriority, TaskStatus


def _tick() -> None:
    # timestamps have millisecond resolution
    time.sleep(0.003)


def _make_task(**overrides) -> Task:
    fields = dict(
        title="Design mockup",
        description=None,
        project_id=uuid4(),
        assignee_id=None,
        due_date=None,
        created_by="creator_1",
    )
    fields.update(overrides)
    return Task.new(**fields)


# --- Project ---------------------------------------------------------------

class TestProject:

    def test_new_stamps_identity_and_audit_fields(self) -> None:
        project = Project.new("Web Redesign", "Landing page refresh", "U1", "U1")

        assert project.name == "Web Redesign"
        assert project.description == "Landing page refresh"
        assert project.owner_id == "U1"
        assert project.status == ProjectStatus.ACTIVE
        assert project.created_by == "U1"
        assert project.updated_by == "U1"
        assert project.created_at == project.updated_at
        assert project.created_at.tzinfo is not None
        assert project.created_at.microsecond % 1000 == 0

    def test_ids_are_unique_for_identical_inputs(self) -> None:
        ids = {Project.new("Same", None, "U1", "U1").id for _ in range(50)}
        assert len(ids) == 50

    @pytest.mark.parametrize(
        "mutate",
        [
            lambda p: p.update_name("Renamed", "U2"),
            lambda p: p.update_description("New text", "U2"),
            lambda p: p.update_description(None, "U2"),
            lambda p: p.update_status(ProjectStatus.ARCHIVED, "U2"),
        ],
    )
    def test_mutations_refresh_audit_pair(self, mutate) -> None:
        project = Project.new("Web Redesign", None, "U1", "U1")
        before = project.updated_at
        _tick()

        mutate(project)

        assert project.updated_at > before
        assert project.updated_at >= project.created_at
        assert project.updated_by == "U2"
        assert project.created_by == "U1"

    def test_any_status_reachable_from_any_other(self) -> None:
        project = Project.new("Web Redesign", None, "U1", "U1")
        for status in [ProjectStatus.COMPLETED, ProjectStatus.ACTIVE, ProjectStatus.ARCHIVED, ProjectStatus.COMPLETED]:
            project.update_status(status, "U1")
            assert project.status == status

    def test_predicates(self) -> None:
        project = Project.new("Web Redesign", None, "U1", "U1")
        assert project.is_active
        assert not project.is_completed

        project.update_status(ProjectStatus.COMPLETED, "U1")
        assert not project.is_active
        assert project.is_completed

    def test_str(self) -> None:
        project = Project.new("Web Redesign", None, "U1", "U1")
        assert str(project) == "Project 'Web Redesign' [Active] - No description"


# --- Task ------------------------------------------------------------------

class TestTask:

    def test_new_defaults(self) -> None:
        project_id = uuid4()
        task = _make_task(project_id=project_id)

        assert task.project_id == project_id
        assert task.status == TaskStatus.TODO
        assert task.priority == TaskPriority.MEDIUM
        assert task.created_at == task.updated_at
        assert task.created_by == task.updated_by == "creator_1"

    def test_new_accepts_priority(self) -> None:
        task = _make_task(priority=TaskPriority.URGENT)
        assert task.priority == TaskPriority.URGENT

    def test_naive_due_date_is_read_as_utc(self) -> None:
        task = _make_task(due_date=datetime(2030, 1, 1, 12, 0))
        assert task.due_date == datetime(2030, 1, 1, 12, 0, tzinfo=timezone.utc)

    def test_ids_are_unique(self) -> None:
        project_id = uuid4()
        first = _make_task(project_id=project_id)
        second = _make_task(project_id=project_id)
        assert first.id != second.id
        assert first.project_id == second.project_id

    @pytest.mark.parametrize(
        "mutate",
        [
            lambda t: t.update_title("New title", "U2"),
            lambda t: t.update_description("Details", "U2"),
            lambda t: t.update_status(TaskStatus.IN_PROGRESS, "U2"),
            lambda t: t.update_priority(TaskPriority.HIGH, "U2"),
            lambda t: t.assign_to("assignee_1", "U2"),
            lambda t: t.set_due_date(datetime.now(timezone.utc), "U2"),
        ],
    )
    def test_mutations_refresh_audit_pair(self, mutate) -> None:
        task = _make_task()
        before = task.updated_at
        _tick()

        mutate(task)

        assert task.updated_at > before
        assert task.updated_by == "U2"

    def test_assignment(self) -> None:
        task = _make_task()
        assert not task.is_assigned

        task.assign_to("assignee_1", "U1")
        assert task.assignee_id == "assignee_1"
        assert task.is_assigned

        task.assign_to(None, "U1")
        assert not task.is_assigned

    def test_not_overdue_without_due_date(self) -> None:
        task = _make_task()
        assert not task.is_overdue
        task.update_status(TaskStatus.BLOCKED, "U1")
        assert not task.is_overdue

    def test_overdue_when_due_date_passed(self) -> None:
        task = _make_task(due_date=datetime.now(timezone.utc) - timedelta(days=1))
        assert task.is_overdue

    def test_not_overdue_when_due_date_in_future(self) -> None:
        task = _make_task(due_date=datetime.now(timezone.utc) + timedelta(days=1))
        assert not task.is_overdue

    def test_completed_task_is_never_overdue(self) -> None:
        task = _make_task(due_date=datetime.now(timezone.utc) - timedelta(days=1))
        task.update_status(TaskStatus.DONE, "U1")

        assert task.is_completed
        assert not task.is_overdue
        assert task.due_date < datetime.now(timezone.utc)

    def test_str(self) -> None:
        task = _make_task(due_date=datetime.now(timezone.utc) - timedelta(days=1))
        assert str(task) == "Task 'Design mockup' [To Do] - Priority: Medium - OVERDUE"

        task.update_status(TaskStatus.DONE, "U1")
        assert str(task) == "Task 'Design mockup' [Done] - Priority: Medium - On track"
