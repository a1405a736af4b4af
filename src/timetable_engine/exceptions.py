"""Custom exceptions for the timetable engine."""


class TimetableError(Exception):
    """Base exception for timetable errors."""

    pass


class InvalidInputError(TimetableError):
    """A payload violates a simple field constraint."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"Invalid {field}: {message}")


class UnknownIdError(TimetableError):
    """An id does not resolve to a stored entity."""

    def __init__(self, kind: str, entity_id: str):
        self.kind = kind
        self.entity_id = entity_id
        super().__init__(f"Unknown {kind} id: '{entity_id}'")


class RepositoryError(TimetableError):
    """A saved timetable state could not be loaded."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        location = f" in '{path}'" if path else ""
        super().__init__(f"Repository error{location}: {message}")
