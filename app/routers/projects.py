import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.project import Project
from app.schemas.project import ProjectIn, ProjectOut
from app.utils.auth import CurrentUser

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/projects", tags=["projects"])


def get_owned_project(db: Session, project_id: uuid.UUID, owner_id: uuid.UUID):
    """Return the project only if ``owner_id`` owns it, else None."""
    return db.query(Project).filter(Project.id == project_id, Project.owner_id == owner_id).first()


def _get_or_404(db: Session, project_id: uuid.UUID, owner_id: uuid.UUID) -> Project:
    project = get_owned_project(db, project_id, owner_id)
    if project is None:
        # foreign rows answer 404 like missing ones
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")
    return project


@router.get("", response_model=list[ProjectOut])
def list_projects(current_user: CurrentUser, db: Session = Depends(get_db)):
    return (
        db.query(Project)
        .filter(Project.owner_id == current_user.id)
        .order_by(Project.created_at.desc())
        .all()
    )


@router.post("", response_model=ProjectOut, status_code=status.HTTP_201_CREATED)
def create_project(request: ProjectIn, current_user: CurrentUser, db: Session = Depends(get_db)):
    project = Project(
        name=request.name,
        description=request.description,
        status=request.status,
        owner_id=current_user.id,
    )
    db.add(project)
    db.commit()
    db.refresh(project)
    logger.info("User %s created project %s", current_user.id, project.id)
    return project


@router.get("/{project_id}", response_model=ProjectOut)
def get_project(project_id: uuid.UUID, current_user: CurrentUser, db: Session = Depends(get_db)):
    return _get_or_404(db, project_id, current_user.id)


@router.put("/{project_id}", response_model=ProjectOut)
def update_project(
    project_id: uuid.UUID, request: ProjectIn, current_user: CurrentUser, db: Session = Depends(get_db)
):
    project = _get_or_404(db, project_id, current_user.id)
    project.name = request.name
    project.description = request.description
    project.status = request.status
    db.commit()
    db.refresh(project)
    return project


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_project(project_id: uuid.UUID, current_user: CurrentUser, db: Session = Depends(get_db)):
    project = _get_or_404(db, project_id, current_user.id)
    # tasks go with it (ORM cascade and ON DELETE CASCADE)
    db.delete(project)
    db.commit()
    logger.info("User %s deleted project %s", current_user.id, project_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
