from pydantic import BaseModel
from typing import List,Optional,Union
from app.models.Task import Task
class Envelope(BaseModel):
    success: bool
    message: str
    data: Optional[Union[Task, List[Task]]] = None
