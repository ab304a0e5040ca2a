from app.models.enums import ProjectStatus, TaskPriority, TaskState
from app.models.user import User
from app.models.project import Project
from app.models.task import Task

__all__ = ["User", "Project", "Task", "ProjectStatus", "TaskPriority", "TaskState"]
