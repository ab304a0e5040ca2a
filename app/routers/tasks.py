import logging
import uuid
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.project import Project
from app.models.task import Task
from app.routers.projects import get_owned_project
from app.schemas.task import TaskIn, TaskOut
from app.utils.auth import CurrentUser

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


def owned_tasks(db: Session, owner_id: uuid.UUID):
    """Tasks whose parent project belongs to ``owner_id``."""
    return db.query(Task).join(Project, Task.project_id == Project.id).filter(Project.owner_id == owner_id)


def _get_or_404(db: Session, task_id: uuid.UUID, owner_id: uuid.UUID) -> Task:
    task = owned_tasks(db, owner_id).filter(Task.id == task_id).first()
    if task is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return task


def _ensure_project(db: Session, project_id: uuid.UUID, owner_id: uuid.UUID):
    if get_owned_project(db, project_id, owner_id) is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Project does not exist for this user.")


@router.get("", response_model=list[TaskOut])
def list_tasks(
    current_user: CurrentUser,
    project_id: Optional[uuid.UUID] = Query(None, description="Only tasks of this project"),
    db: Session = Depends(get_db),
):
    query = owned_tasks(db, current_user.id)
    if project_id is not None:
        query = query.filter(Task.project_id == project_id)
    return query.order_by(Task.due_date.asc(), Task.created_at.asc()).all()


@router.post("", response_model=TaskOut, status_code=status.HTTP_201_CREATED)
def create_task(request: TaskIn, current_user: CurrentUser, db: Session = Depends(get_db)):
    _ensure_project(db, request.project_id, current_user.id)
    task = Task(
        title=request.title,
        priority=request.priority,
        state=request.state,
        due_date=request.due_date,
        project_id=request.project_id,
    )
    db.add(task)
    db.commit()
    db.refresh(task)
    logger.info("User %s created task %s", current_user.id, task.id)
    return task


@router.get("/{task_id}", response_model=TaskOut)
def get_task(task_id: uuid.UUID, current_user: CurrentUser, db: Session = Depends(get_db)):
    return _get_or_404(db, task_id, current_user.id)


@router.put("/{task_id}", response_model=TaskOut)
def update_task(task_id: uuid.UUID, request: TaskIn, current_user: CurrentUser, db: Session = Depends(get_db)):
    task = _get_or_404(db, task_id, current_user.id)
    _ensure_project(db, request.project_id, current_user.id)
    task.title = request.title
    task.priority = request.priority
    task.state = request.state
    task.due_date = request.due_date
    task.project_id = request.project_id
    db.commit()
    db.refresh(task)
    return task


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(task_id: uuid.UUID, current_user: CurrentUser, db: Session = Depends(get_db)):
    task = _get_or_404(db, task_id, current_user.id)
    db.delete(task)
    db.commit()
    logger.info("User %s deleted task %s", current_user.id, task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
