from .base import EnvelopeDecodeError, RestBaseRepository
from .employee import RestEmployeeRepository

__all__ = ['EnvelopeDecodeError', 'RestBaseRepository', 'RestEmployeeRepository']
