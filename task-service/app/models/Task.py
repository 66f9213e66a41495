from datetime import datetime
from pydantic import BaseModel
from typing import Literal,get_args
Status = Literal["pending", "in-progress", "completed"]
STATUSES = get_args(Status)
class Task(BaseModel):
    id: int
    title: str
    description: str
    status: Status = "pending"
    createdAt: datetime
