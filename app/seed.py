"""Demo account so a fresh install has something to sign in to."""

import logging
from datetime import datetime, timedelta, UTC

from sqlalchemy.orm import Session

from app.models.enums import ProjectStatus, TaskPriority, TaskState
from app.models.project import Project
from app.models.task import Task
from app.models.user import User
from app.utils.auth import hash_password

logger = logging.getLogger(__name__)

DEMO_EMAIL = "demo@tracker.dev"
DEMO_PASSWORD = "Demo123!"


def seed_demo_data(db: Session) -> bool:
    """Insert the demo user with two projects and three tasks.

    Does nothing when any user exists. Returns True if rows were inserted.
    """
    if db.query(User).first() is not None:
        return False

    now = datetime.now(UTC)
    today = now.date()
    password_hash, password_salt = hash_password(DEMO_PASSWORD)
    user = User(email=DEMO_EMAIL, password_hash=password_hash, password_salt=password_salt, created_at=now)

    prep = Project(
        name="Interview Prep App",
        description="Build a full-stack app to demonstrate engineering depth",
        status=ProjectStatus.IN_PROGRESS,
        created_at=now - timedelta(days=7),
        owner=user,
    )
    pipeline = Project(
        name="CI/CD Pipeline",
        description="Automate test/build/deploy with GitHub Actions",
        status=ProjectStatus.NOT_STARTED,
        created_at=now - timedelta(days=1),
        owner=user,
    )
    prep.tasks = [
        Task(
            title="Set up the REST API",
            priority=TaskPriority.HIGH,
            state=TaskState.DONE,
            due_date=today - timedelta(days=6),
            created_at=now - timedelta(days=6),
        ),
        Task(
            title="Create the dashboard page",
            priority=TaskPriority.HIGH,
            state=TaskState.IN_PROGRESS,
            due_date=today + timedelta(days=2),
            created_at=now - timedelta(days=2),
        ),
    ]
    pipeline.tasks = [
        Task(
            title="Draft Terraform modules",
            priority=TaskPriority.MEDIUM,
            state=TaskState.NOT_STARTED,
            due_date=today + timedelta(days=4),
            created_at=now,
        ),
    ]

    db.add(user)
    db.commit()
    logger.info("Seeded demo account %s", DEMO_EMAIL)
    return True
