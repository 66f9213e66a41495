from pydantic import BaseModel
from typing import Optional
class TaskUpdate(BaseModel):
    title: Optional[str]=None
    description: Optional[str]=None
    status: Optional[str]=None
