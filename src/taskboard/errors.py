"""Exception types shared by the client library and the backend."""


class TaskboardError(Exception):
    """Base class for taskboard errors."""


class ApiError(TaskboardError):
    """The REST backend could not serve a request.

    Raised for transport failures, non-2xx responses and bodies that do not
    decode into the expected record.
    """

    def __init__(self, message: str, *, status_code: int | None = None, url: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.url = url


class NotFoundError(TaskboardError):
    """No record with the requested id exists."""

    def __init__(self, entity: str, entity_id: str) -> None:
        super().__init__(f"{entity} not found")
        self.entity = entity
        self.entity_id = entity_id
