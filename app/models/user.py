import uuid
from datetime import datetime, UTC

from sqlalchemy import Column, String, LargeBinary, Uuid
from sqlalchemy.orm import relationship

from app.database import Base, UTCDateTime


def utcnow():
    return datetime.now(UTC)


class User(Base):
    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    # stored trimmed and lower-cased; see normalize_email
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(LargeBinary(32), nullable=False)
    password_salt = Column(LargeBinary(16), nullable=False)
    created_at = Column(UTCDateTime, nullable=False, default=utcnow)

    projects = relationship("Project", back_populates="owner", cascade="all, delete-orphan")


def normalize_email(email: str) -> str:
    return email.strip().lower()
