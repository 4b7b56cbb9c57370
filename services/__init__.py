from .employee import EmployeeService
from .errors import EmployeeNotFoundError, EmployeeServiceError
from .retry import FailureKind, RetryPolicy, classify_failure

__all__ = [
    'EmployeeNotFoundError',
    'EmployeeService',
    'EmployeeServiceError',
    'FailureKind',
    'RetryPolicy',
    'classify_failure',
]
