import uuid

from sqlalchemy import Column, String, Date, Enum, ForeignKey, Uuid
from sqlalchemy.orm import relationship

from app.database import Base, UTCDateTime
from app.models.enums import TaskPriority, TaskState
from app.models.user import utcnow


class Task(Base):
    __tablename__ = "tasks"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    title = Column(String(120), nullable=False)
    priority = Column(Enum(TaskPriority, name="task_priority"), nullable=False, default=TaskPriority.MEDIUM)
    state = Column(Enum(TaskState, name="task_state"), nullable=False, default=TaskState.NOT_STARTED)
    due_date = Column(Date, nullable=False)
    created_at = Column(UTCDateTime, nullable=False, default=utcnow)
    # owner is reached through the parent project
    project_id = Column(Uuid, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True)

    project = relationship("Project", back_populates="tasks")
