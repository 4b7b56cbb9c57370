from .employee import Employee, EmployeeInput
from .envelope import ApiResponse

__all__ = ['ApiResponse', 'Employee', 'EmployeeInput']
