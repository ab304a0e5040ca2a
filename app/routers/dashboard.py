import uuid
from datetime import date, datetime, UTC
from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.enums import TaskState
from app.models.project import Project
from app.models.task import Task
from app.routers.tasks import owned_tasks
from app.schemas.dashboard import DashboardSummary
from app.utils.auth import CurrentUser

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


def get_today() -> date:
    """Reference date for "upcoming"; a dependency so tests can pin it."""
    return datetime.now(UTC).date()


def build_summary(db: Session, owner_id: uuid.UUID, today: Optional[date] = None) -> DashboardSummary:
    """Count the owner's projects and tasks.

    Upcoming tasks are those due today or later that are not done yet.
    """
    if today is None:
        today = get_today()
    tasks = owned_tasks(db, owner_id)
    return DashboardSummary(
        projects=db.query(Project).filter(Project.owner_id == owner_id).count(),
        tasks=tasks.count(),
        completed_tasks=tasks.filter(Task.state == TaskState.DONE).count(),
        in_progress_tasks=tasks.filter(Task.state == TaskState.IN_PROGRESS).count(),
        upcoming_tasks=tasks.filter(Task.due_date >= today, Task.state != TaskState.DONE).count(),
    )


@router.get("/summary", response_model=DashboardSummary)
def summary(current_user: CurrentUser, db: Session = Depends(get_db), today: date = Depends(get_today)):
    return build_summary(db, current_user.id, today)
