import uuid

from sqlalchemy import Column, String, Enum, ForeignKey, Uuid
from sqlalchemy.orm import relationship

from app.database import Base, UTCDateTime
from app.models.enums import ProjectStatus
from app.models.user import utcnow


class Project(Base):
    __tablename__ = "projects"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(100), nullable=False)
    description = Column(String(300), nullable=False)
    status = Column(Enum(ProjectStatus, name="project_status"), nullable=False, default=ProjectStatus.NOT_STARTED)
    created_at = Column(UTCDateTime, nullable=False, default=utcnow)
    owner_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    owner = relationship("User", back_populates="projects")
    tasks = relationship("Task", back_populates="project", cascade="all, delete-orphan")
