from dataclasses import asdict, dataclass, field
from typing import Any

import marshmallow
import marshmallow_dataclass
from dependency_injector.wiring import Provide, inject
from flask import Blueprint, Response, request
from flask.views import MethodView

from containers import Container
from models import Employee, EmployeeInput
from services import EmployeeService

from .util import class_route, error_response, handles_service_errors, json_response, validation_error_response

blp = Blueprint('Employees', __name__)

JSON_VALIDATION_ERROR = 'Request body must be a JSON object.'


def employee_to_dict(employee: Employee) -> dict[str, Any]:
    return asdict(employee)


def not_blank(value: str) -> None:
    if not value.strip():
        raise marshmallow.ValidationError('Must not be blank.')


# Employee creation validation class
@dataclass
class EmployeeCreationBody:
    name: str = field(metadata={'validate': [not_blank]})
    salary: int = field(metadata={'validate': [marshmallow.validate.Range(min=1)]})
    age: int = field(metadata={'validate': [marshmallow.validate.Range(min=16, max=75)]})
    title: str = field(metadata={'validate': [not_blank]})


@class_route(blp, '/api/v1/employee')
class Employees(MethodView):
    init_every_request = False

    @inject
    @handles_service_errors
    def get(self, employee_service: EmployeeService = Provide[Container.employee_service]) -> Response:
        employees = employee_service.get_all()
        return json_response([employee_to_dict(employee) for employee in employees], 200)

    @inject
    @handles_service_errors
    def post(self, employee_service: EmployeeService = Provide[Container.employee_service]) -> Response:
        employee_schema = marshmallow_dataclass.class_schema(EmployeeCreationBody)()
        req_json = request.get_json(silent=True)
        if not isinstance(req_json, dict):
            return error_response(JSON_VALIDATION_ERROR, 400)

        try:
            data: EmployeeCreationBody = employee_schema.load(req_json)
        except marshmallow.ValidationError as err:
            return validation_error_response(err)

        employee = employee_service.create(
            EmployeeInput(name=data.name, salary=data.salary, age=data.age, title=data.title)
        )

        return json_response(employee_to_dict(employee), 200)


@class_route(blp, '/api/v1/employee/search/<search_string>')
class EmployeeSearch(MethodView):
    init_every_request = False

    @inject
    @handles_service_errors
    def get(
        self,
        search_string: str,
        employee_service: EmployeeService = Provide[Container.employee_service],
    ) -> Response:
        employees = employee_service.search_by_name(search_string)
        return json_response([employee_to_dict(employee) for employee in employees], 200)


@class_route(blp, '/api/v1/employee/highestSalary')
class HighestSalary(MethodView):
    init_every_request = False

    @inject
    @handles_service_errors
    def get(self, employee_service: EmployeeService = Provide[Container.employee_service]) -> Response:
        return json_response(employee_service.highest_salary(), 200)


@class_route(blp, '/api/v1/employee/topTenHighestEarningEmployeeNames')
class TopTenHighestEarningEmployeeNames(MethodView):
    init_every_request = False

    @inject
    @handles_service_errors
    def get(self, employee_service: EmployeeService = Provide[Container.employee_service]) -> Response:
        return json_response(employee_service.top_earning_names(), 200)


@class_route(blp, '/api/v1/employee/<employee_id>')
class EmployeeDetail(MethodView):
    init_every_request = False

    @inject
    @handles_service_errors
    def get(
        self,
        employee_id: str,
        employee_service: EmployeeService = Provide[Container.employee_service],
    ) -> Response:
        employee = employee_service.get(employee_id)
        return json_response(employee_to_dict(employee), 200)

    @inject
    @handles_service_errors
    def delete(
        self,
        employee_id: str,
        employee_service: EmployeeService = Provide[Container.employee_service],
    ) -> Response:
        name = employee_service.delete(employee_id)
        return json_response(name, 200)
