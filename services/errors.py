class EmployeeNotFoundError(Exception):
    def __init__(self, employee_id: str) -> None:
        super().__init__(f'Employee not found with id: {employee_id}')
        self.employee_id = employee_id


class EmployeeServiceError(Exception):
    """
    The upstream employee store could not satisfy a request.

    Raised after retries are exhausted, for non-retryable upstream statuses, and when
    a successful upstream response breaks the expected contract. ``status_code`` is the
    last HTTP status seen from upstream, or ``None`` if it was never reached.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
