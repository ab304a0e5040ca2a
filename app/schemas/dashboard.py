from pydantic import BaseModel


class DashboardSummary(BaseModel):
    projects: int
    tasks: int
    completed_tasks: int
    in_progress_tasks: int
    upcoming_tasks: int
