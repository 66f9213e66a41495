from typing import Optional
from pydantic import BaseModel

# status is checked by the request validation stage,
# so unknown values get "Invalid status value"
class TaskCreate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None
