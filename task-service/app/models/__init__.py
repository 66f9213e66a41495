from app.models.Task import STATUSES,Task
from app.models.TasksCreate import TaskCreate
from app.models.TaskUpdate import TaskUpdate
from app.models.Envelope import Envelope

__all__ = ["STATUSES", "Task", "TaskCreate", "TaskUpdate", "Envelope"]
