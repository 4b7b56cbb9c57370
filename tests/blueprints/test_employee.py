import json
from typing import Any, cast
from unittest.mock import Mock

import responses
from faker import Faker
from unittest_parametrize import ParametrizedTestCase, parametrize

from app import create_app
from containers import DEFAULT_EMPLOYEE_SVC_URL
from models import Employee, EmployeeInput
from services import EmployeeNotFoundError, EmployeeService, EmployeeServiceError, RetryPolicy


class TestEmployee(ParametrizedTestCase):
    EMPLOYEE_API_URL = '/api/v1/employee'

    def setUp(self) -> None:
        self.faker = Faker()
        self.app = create_app()
        self.client = self.app.test_client()
        self.service_mock = Mock(EmployeeService)

    def gen_employee(self) -> Employee:
        return Employee(
            id=cast(str, self.faker.uuid4()),
            employee_name=self.faker.name(),
            employee_salary=self.faker.pyint(min_value=1, max_value=500000),
            employee_age=self.faker.pyint(min_value=16, max_value=75),
            employee_title=self.faker.job(),
            employee_email=self.faker.email(),
        )

    def valid_body(self) -> dict[str, Any]:
        return {
            'name': self.faker.name(),
            'salary': self.faker.pyint(min_value=1, max_value=500000),
            'age': self.faker.pyint(min_value=16, max_value=75),
            'title': self.faker.job(),
        }

    def test_get_all(self) -> None:
        employees = [self.gen_employee(), self.gen_employee()]
        cast(Mock, self.service_mock.get_all).return_value = employees

        with self.app.container.employee_service.override(self.service_mock):
            resp = self.client.get(self.EMPLOYEE_API_URL)

        self.assertEqual(resp.status_code, 200)
        resp_data = json.loads(resp.get_data())
        self.assertEqual(len(resp_data), 2)
        self.assertEqual(resp_data[0]['id'], employees[0].id)
        self.assertEqual(resp_data[0]['employee_name'], employees[0].employee_name)
        self.assertEqual(resp_data[1]['employee_salary'], employees[1].employee_salary)

    def test_get_all_upstream_error(self) -> None:
        cast(Mock, self.service_mock.get_all).side_effect = EmployeeServiceError('Failed after 3 attempts', 429)

        with self.app.container.employee_service.override(self.service_mock):
            resp = self.client.get(self.EMPLOYEE_API_URL)

        self.assertEqual(resp.status_code, 500)
        resp_data = json.loads(resp.get_data())
        self.assertEqual(resp_data, {'code': 500, 'message': 'Failed after 3 attempts'})

    def test_search(self) -> None:
        employee = self.gen_employee()
        cast(Mock, self.service_mock.search_by_name).return_value = [employee]

        with self.app.container.employee_service.override(self.service_mock):
            resp = self.client.get(f'{self.EMPLOYEE_API_URL}/search/john')

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(json.loads(resp.get_data()), [employee.__dict__])
        cast(Mock, self.service_mock.search_by_name).assert_called_once_with('john')

    def test_get_by_id(self) -> None:
        employee = self.gen_employee()
        cast(Mock, self.service_mock.get).return_value = employee

        with self.app.container.employee_service.override(self.service_mock):
            resp = self.client.get(f'{self.EMPLOYEE_API_URL}/{employee.id}')

        self.assertEqual(resp.status_code, 200)
        resp_data = json.loads(resp.get_data())
        self.assertEqual(resp_data['id'], employee.id)
        self.assertEqual(resp_data['employee_salary'], employee.employee_salary)

    def test_get_by_id_not_found(self) -> None:
        cast(Mock, self.service_mock.get).side_effect = EmployeeNotFoundError('missing')

        with self.app.container.employee_service.override(self.service_mock):
            resp = self.client.get(f'{self.EMPLOYEE_API_URL}/missing')

        self.assertEqual(resp.status_code, 404)
        resp_data = json.loads(resp.get_data())
        self.assertEqual(resp_data, {'code': 404, 'message': 'Employee not found with id: missing'})

    def test_not_found_logged_as_warning(self) -> None:
        cast(Mock, self.service_mock.get).side_effect = EmployeeNotFoundError('missing')

        with (
            self.app.container.employee_service.override(self.service_mock),
            self.assertLogs('blueprints.util', level='WARNING') as logs,
        ):
            self.client.get(f'{self.EMPLOYEE_API_URL}/missing')

        self.assertEqual([record.levelname for record in logs.records], ['WARNING'])

    def test_highest_salary(self) -> None:
        cast(Mock, self.service_mock.highest_salary).return_value = 75000

        with self.app.container.employee_service.override(self.service_mock):
            resp = self.client.get(f'{self.EMPLOYEE_API_URL}/highestSalary')

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(json.loads(resp.get_data()), 75000)
        cast(Mock, self.service_mock.get).assert_not_called()

    def test_top_ten(self) -> None:
        names = [f'Employee {i}' for i in range(1, 6)]
        cast(Mock, self.service_mock.top_earning_names).return_value = names

        with self.app.container.employee_service.override(self.service_mock):
            resp = self.client.get(f'{self.EMPLOYEE_API_URL}/topTenHighestEarningEmployeeNames')

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(json.loads(resp.get_data()), names)

    def test_create(self) -> None:
        body = self.valid_body()
        employee = self.gen_employee()
        cast(Mock, self.service_mock.create).return_value = employee

        with self.app.container.employee_service.override(self.service_mock):
            resp = self.client.post(self.EMPLOYEE_API_URL, json=body)

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(json.loads(resp.get_data())['id'], employee.id)
        cast(Mock, self.service_mock.create).assert_called_once_with(EmployeeInput(**body))

    def test_create_not_json(self) -> None:
        with self.app.container.employee_service.override(self.service_mock):
            resp = self.client.post(self.EMPLOYEE_API_URL, data='name=John', content_type='text/plain')

        self.assertEqual(resp.status_code, 400)
        resp_data = json.loads(resp.get_data())
        self.assertEqual(resp_data, {'code': 400, 'message': 'Request body must be a JSON object.'})
        cast(Mock, self.service_mock.create).assert_not_called()

    @parametrize(
        'field,value',
        [
            ('name', ''),
            ('name', '   '),
            ('title', ''),
            ('salary', 0),
            ('salary', -10),
            ('age', 15),
            ('age', 76),
            ('age', 'old'),
            ('name', None),
        ],
    )
    def test_create_invalid_body(self, field: str, value: Any) -> None:  # noqa: ANN401
        body = self.valid_body()
        body[field] = value

        with self.app.container.employee_service.override(self.service_mock):
            resp = self.client.post(self.EMPLOYEE_API_URL, json=body)

        self.assertEqual(resp.status_code, 400)
        resp_data = json.loads(resp.get_data())
        self.assertEqual(resp_data['code'], 400)
        self.assertIn(field, resp_data['errors'])
        cast(Mock, self.service_mock.create).assert_not_called()

    def test_create_missing_field(self) -> None:
        body = self.valid_body()
        del body['title']

        with self.app.container.employee_service.override(self.service_mock):
            resp = self.client.post(self.EMPLOYEE_API_URL, json=body)

        self.assertEqual(resp.status_code, 400)
        self.assertIn('title', json.loads(resp.get_data())['errors'])

    def test_delete(self) -> None:
        cast(Mock, self.service_mock.delete).return_value = 'John Doe'

        with self.app.container.employee_service.override(self.service_mock):
            resp = self.client.delete(f'{self.EMPLOYEE_API_URL}/1')

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(json.loads(resp.get_data()), 'John Doe')
        cast(Mock, self.service_mock.delete).assert_called_once_with('1')

    def test_delete_not_found(self) -> None:
        cast(Mock, self.service_mock.delete).side_effect = EmployeeNotFoundError('missing')

        with self.app.container.employee_service.override(self.service_mock):
            resp = self.client.delete(f'{self.EMPLOYEE_API_URL}/missing')

        self.assertEqual(resp.status_code, 404)

    def test_get_all_through_upstream(self) -> None:
        with (
            self.app.container.retry_policy.override(RetryPolicy(sleep=Mock())),
            responses.RequestsMock() as rsps,
        ):
            rsps.get(DEFAULT_EMPLOYEE_SVC_URL, status=429)
            rsps.get(
                DEFAULT_EMPLOYEE_SVC_URL,
                json={'data': [{'id': '1', 'employee_name': 'John Doe', 'employee_salary': 50000}], 'status': 'ok'},
            )

            resp = self.client.get(self.EMPLOYEE_API_URL)

        self.assertEqual(resp.status_code, 200)
        resp_data = json.loads(resp.get_data())
        self.assertEqual(resp_data[0]['employee_name'], 'John Doe')

    def test_get_by_id_through_upstream_not_found(self) -> None:
        with responses.RequestsMock() as rsps:
            rsps.get(f'{DEFAULT_EMPLOYEE_SVC_URL}/missing', status=404)

            resp = self.client.get(f'{self.EMPLOYEE_API_URL}/missing')

        self.assertEqual(resp.status_code, 404)
