"""
Domain Exceptions
Errors raised by record store and enrollment operations
"""


class RecordsError(Exception):
    """Base class for all records manager errors"""


class NotFoundError(RecordsError):
    """Unknown student or course identifier"""

    def __init__(self, kind: str, identifier: str):
        self.kind = kind
        self.identifier = identifier
        super().__init__(f"{kind} not found: {identifier}")


class DuplicateEnrollmentError(RecordsError):
    """Student already holds an active enrollment in the course"""


class CreditLimitExceededError(RecordsError):
    """Enrollment would push active credits over the semester cap"""

    def __init__(self, current: int, adding: int, maximum: int):
        self.current = current
        self.adding = adding
        self.maximum = maximum
        super().__init__(
            f"Credit limit exceeded. Current: {current}, "
            f"Adding: {adding}, Max: {maximum}"
        )
