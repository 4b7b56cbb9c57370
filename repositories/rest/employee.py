from typing import Any

import dacite

from models import ApiResponse, Employee, EmployeeInput
from repositories import EmployeeRepository

from .base import EnvelopeDecodeError, RestBaseRepository

# Upstream numbers such as 75000.0 are accepted for integer fields
EMPLOYEE_DACITE_CONFIG = dacite.Config(cast=[int])


def employee_from_dict(data: Any) -> Employee:  # noqa: ANN401
    if not isinstance(data, dict):
        raise EnvelopeDecodeError('Employee payload is not a JSON object')

    try:
        return dacite.from_dict(data_class=Employee, data=data, config=EMPLOYEE_DACITE_CONFIG)
    except (dacite.DaciteError, TypeError, ValueError) as err:
        raise EnvelopeDecodeError(f'Invalid employee payload: {err}') from err


def employee_list_from_data(data: Any) -> list[Employee]:  # noqa: ANN401
    if not isinstance(data, list):
        raise EnvelopeDecodeError('Employee list payload is not a JSON array')

    return [employee_from_dict(item) for item in data]


def bool_from_data(data: Any) -> bool:  # noqa: ANN401
    if not isinstance(data, bool):
        raise EnvelopeDecodeError('Delete payload is not a boolean')

    return data


class RestEmployeeRepository(EmployeeRepository, RestBaseRepository):
    def __init__(self, base_url: str, connect_timeout: float = 10.0, read_timeout: float = 10.0) -> None:
        RestBaseRepository.__init__(self, base_url, connect_timeout, read_timeout)

    def get_all(self) -> ApiResponse[list[Employee]]:
        resp = self.send('GET', self.base_url)
        return self.parse_envelope(resp, employee_list_from_data)

    def get(self, employee_id: str) -> ApiResponse[Employee]:
        resp = self.send('GET', f'{self.base_url}/{employee_id}')
        return self.parse_envelope(resp, employee_from_dict)

    def create(self, employee: EmployeeInput) -> ApiResponse[Employee]:
        data = {
            'name': employee.name,
            'salary': employee.salary,
            'age': employee.age,
            'title': employee.title,
        }

        resp = self.send('POST', self.base_url, data)
        return self.parse_envelope(resp, employee_from_dict)

    def delete(self, name: str) -> ApiResponse[bool]:
        resp = self.send('DELETE', self.base_url, {'name': name})
        return self.parse_envelope(resp, bool_from_data)
