from typing import Optional
from app.errors import ValidationError
from app.models import STATUSES

MISSING_FIELDS = "Missing required fields: title and description"
INVALID_STATUS = "Invalid status value"


def require_fields(title: Optional[str], description: Optional[str]) -> None:
    if not title or not description:
        raise ValidationError(MISSING_FIELDS)


def check_status(status: Optional[str]) -> None:
    # empty means "not provided"
    if status and status not in STATUSES:
        raise ValidationError(INVALID_STATUS)
