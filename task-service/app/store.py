import logging,threading
from datetime import datetime,timezone
from typing import Callable,List,Optional
from app.errors import NotFoundError
from app.models import Task
from app.validation import check_status,require_fields
logger = logging.getLogger(__name__)
SORT_ORDERS = ("asc", "desc")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ids only move forward; reads hand out copies, never stored records
class TaskStore:
    def __init__(self, clock: Callable[[], datetime] = utcnow):
        self._tasks: List[Task] = []
        self._next_id = 1
        self._lock = threading.Lock()
        self._clock = clock

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def _find(self, task_id: int) -> Task:
        for task in self._tasks:
            if task.id == task_id:
                return task
        raise NotFoundError()

    def create(self, title: Optional[str], description: Optional[str],
               status: Optional[str] = None) -> Task:
        require_fields(title, description)
        check_status(status)
        with self._lock:
            task = Task(
                id=self._next_id,
                title=title,
                description=description,
                status=status or "pending",
                createdAt=self._clock(),
            )
            self._next_id += 1
            self._tasks.append(task)
        logger.debug("created task %s", task.id)
        return task.model_copy()

    def list(self, status: Optional[str] = None, sort: Optional[str] = None) -> List[Task]:
        with self._lock:
            result = [t.model_copy() for t in self._tasks]
        if status:
            result = [t for t in result if t.status == status]
        if sort in SORT_ORDERS:
            result.sort(key=lambda t: t.createdAt, reverse=(sort == "desc"))
        return result

    def get(self, task_id: int) -> Task:
        with self._lock:
            return self._find(task_id).model_copy()

    def update(self, task_id: int, title: Optional[str] = None,
               description: Optional[str] = None, status: Optional[str] = None) -> Task:
        with self._lock:
            task = self._find(task_id)
            check_status(status)
            if title:
                task.title = title
            if description:
                task.description = description
            if status:
                task.status = status
            updated = task.model_copy()
        logger.debug("updated task %s", task_id)
        return updated

    def delete(self, task_id: int) -> None:
        with self._lock:
            task = self._find(task_id)
            self._tasks.remove(task)
        logger.debug("deleted task %s", task_id)
