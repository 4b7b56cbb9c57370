from dependency_injector import containers, providers

from repositories.rest import RestEmployeeRepository
from services import EmployeeService, RetryPolicy

DEFAULT_EMPLOYEE_SVC_URL = 'http://localhost:8112/api/v1/employee'


def ms_to_seconds(ms: float) -> float:
    return ms / 1000


class Container(containers.DeclarativeContainer):
    wiring_config = containers.WiringConfiguration(packages=['blueprints'])

    config = providers.Configuration(
        default={
            'svc': {
                'employee': {
                    'url': DEFAULT_EMPLOYEE_SVC_URL,
                    'connect_timeout': 10.0,
                    'read_timeout': 10.0,
                    'max_attempts': 3,
                    'retry_delay_ms': 1000,
                },
            },
        },
    )

    employee_repo = providers.ThreadSafeSingleton(
        RestEmployeeRepository,
        base_url=config.svc.employee.url,
        connect_timeout=config.svc.employee.connect_timeout,
        read_timeout=config.svc.employee.read_timeout,
    )

    retry_policy = providers.ThreadSafeSingleton(
        RetryPolicy,
        max_attempts=config.svc.employee.max_attempts,
        base_delay=providers.Callable(ms_to_seconds, config.svc.employee.retry_delay_ms),
    )

    employee_service = providers.Factory(
        EmployeeService,
        employee_repo=employee_repo,
        retry=retry_policy,
    )
