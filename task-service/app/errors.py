class TaskServiceError(Exception):
    status_code = 500
    message = "Internal Server Error"

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(TaskServiceError):
    status_code = 400
    message = "Invalid request body"


class NotFoundError(TaskServiceError):
    status_code = 404
    message = "Task not found"


class InternalError(TaskServiceError):
    pass
