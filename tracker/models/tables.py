"""
Table definitions for projects and tasks
"""
from sqlalchemy import Column, DateTime, Enum as SQLEnum, ForeignKey, String, Text
from sqlalchemy.dialects import mysql
from sqlalchemy.types import TypeDecorator

from tracker.core.database import Base
from tracker.models.enums import ProjectStatus, TaskPriority, TaskStatus
from tracker.utils.timezone import ensure_utc
from tracker.validation import ACTOR_ID_MAX_LENGTH


class UTCDateTime(TypeDecorator):
    """Stores naive UTC, loads aware UTC (MySQL/SQLite drop tzinfo)"""

    impl = DateTime
    cache_ok = True

    def load_dialect_impl(self, dialect):
        # MySQL DATETIME defaults to whole seconds
        if dialect.name == "mysql":
            return dialect.type_descriptor(mysql.DATETIME(fsp=3))
        return dialect.type_descriptor(DateTime())

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return ensure_utc(value).replace(tzinfo=None)

    def process_result_value(self, value, dialect):
        return ensure_utc(value)


def _enum_values(enum_cls):
    return [member.value for member in enum_cls]


class ProjectRecord(Base):
    __tablename__ = "projects"

    id = Column(String(36), primary_key=True)
    name = Column(String(255), nullable=False)
    description = Column(Text)
    status = Column(
        SQLEnum(ProjectStatus, name="project_status", values_callable=_enum_values),
        nullable=False,
        default=ProjectStatus.ACTIVE,
    )
    owner_id = Column(String(ACTOR_ID_MAX_LENGTH), nullable=False, index=True)
    created_at = Column(UTCDateTime, nullable=False)
    updated_at = Column(UTCDateTime, nullable=False)
    created_by = Column(String(ACTOR_ID_MAX_LENGTH), nullable=False)
    updated_by = Column(String(ACTOR_ID_MAX_LENGTH), nullable=False)

    def __repr__(self):
        return f"<ProjectRecord(id={self.id}, name='{self.name}', status='{self.status}')>"


class TaskRecord(Base):
    __tablename__ = "tasks"

    id = Column(String(36), primary_key=True)
    project_id = Column(
        String(36),
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title = Column(String(255), nullable=False)
    description = Column(Text)
    status = Column(
        SQLEnum(TaskStatus, name="task_status", values_callable=_enum_values),
        nullable=False,
        default=TaskStatus.TODO,
    )
    priority = Column(
        SQLEnum(TaskPriority, name="task_priority", values_callable=_enum_values),
        nullable=False,
        default=TaskPriority.MEDIUM,
    )
    assignee_id = Column(String(ACTOR_ID_MAX_LENGTH))
    due_date = Column(UTCDateTime)
    created_at = Column(UTCDateTime, nullable=False, index=True)
    updated_at = Column(UTCDateTime, nullable=False)
    created_by = Column(String(ACTOR_ID_MAX_LENGTH), nullable=False)
    updated_by = Column(String(ACTOR_ID_MAX_LENGTH), nullable=False)

    def __repr__(self):
        return f"<TaskRecord(id={self.id}, title='{self.title}', status='{self.status}')>"
