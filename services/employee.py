import logging
import requests

from models import Employee, EmployeeInput
from repositories import EmployeeRepository
from repositories.rest import EnvelopeDecodeError

from .errors import EmployeeNotFoundError, EmployeeServiceError
from .retry import RetryPolicy, status_of

logger = logging.getLogger(__name__)

TOP_EARNERS_LIMIT = 10


class EmployeeService:
    """
    Employee operations backed by the upstream employee store.

    Every upstream call goes through ``retry``. Failures leave this class as either
    ``EmployeeNotFoundError`` or ``EmployeeServiceError``.
    """

    def __init__(
        self,
        employee_repo: EmployeeRepository,
        retry: RetryPolicy,
    ) -> None:
        self.employee_repo = employee_repo
        self.retry = retry

    def upstream_error(self, action: str, err: Exception) -> EmployeeServiceError:
        if isinstance(err, EmployeeServiceError):
            logger.error('Failed %s: %s', action, err.message)
            return EmployeeServiceError(f'Failed {action}: {err.message}', err.status_code)

        if isinstance(err, requests.HTTPError) and err.response is not None:
            logger.error('Failed %s: HTTP %d', action, err.response.status_code)
            return EmployeeServiceError(f'Failed {action}: {err}', err.response.status_code)

        if isinstance(err, EnvelopeDecodeError):
            logger.error('Failed %s: %s', action, err)
            return EmployeeServiceError(f'Failed {action}: {err}')

        logger.error('Error communicating with employee service, failed %s', action)
        return EmployeeServiceError('Unable to communicate with employee service')

    def get_all(self) -> list[Employee]:
        logger.info('Fetching all employees')

        try:
            resp = self.retry.execute(self.employee_repo.get_all)
        except (requests.RequestException, EnvelopeDecodeError, EmployeeServiceError) as err:
            raise self.upstream_error('to fetch employees', err) from err

        if resp.data is None:
            logger.warning('Received empty response body')
            return []

        logger.info('Successfully fetched %d employees', len(resp.data))
        return resp.data

    def get(self, employee_id: str) -> Employee:
        logger.info('Fetching employee with id: %s', employee_id)

        try:
            resp = self.retry.execute(lambda: self.employee_repo.get(employee_id))
        except requests.HTTPError as err:
            if status_of(err) == requests.codes.not_found:
                logger.warning('Employee not found with id: %s', employee_id)
                raise EmployeeNotFoundError(employee_id) from err
            raise self.upstream_error('to fetch employee', err) from err
        except (requests.RequestException, EnvelopeDecodeError, EmployeeServiceError) as err:
            raise self.upstream_error('to fetch employee', err) from err

        if resp.data is None:
            logger.warning('Employee not found with id: %s', employee_id)
            raise EmployeeNotFoundError(employee_id)

        logger.info('Successfully fetched employee with id: %s', employee_id)
        return resp.data

    def search_by_name(self, query: str) -> list[Employee]:
        needle = query.casefold()
        matches = [
            employee
            for employee in self.get_all()
            if employee.employee_name is not None and needle in employee.employee_name.casefold()
        ]

        logger.info('Found %d employees matching search string: %s', len(matches), query)
        return matches

    def highest_salary(self) -> int:
        highest = max(
            (employee.employee_salary for employee in self.get_all() if employee.employee_salary is not None),
            default=0,
        )

        logger.info('Highest salary found: %d', highest)
        return highest

    def top_earning_names(self, limit: int = TOP_EARNERS_LIMIT) -> list[str | None]:
        salaried = [employee for employee in self.get_all() if employee.employee_salary is not None]
        ranked = sorted(salaried, key=lambda employee: employee.employee_salary, reverse=True)  # type: ignore[arg-type,return-value]
        names = [employee.employee_name for employee in ranked[:limit]]

        logger.info('Found %d employees in top %d highest earners', len(names), limit)
        return names

    def create(self, employee: EmployeeInput) -> Employee:
        logger.info('Creating employee with name: %s', employee.name)

        try:
            resp = self.retry.execute(lambda: self.employee_repo.create(employee))
        except (requests.RequestException, EnvelopeDecodeError, EmployeeServiceError) as err:
            raise self.upstream_error('to create employee', err) from err

        if resp.data is None:
            logger.error('Failed to create employee - empty response')
            raise EmployeeServiceError('Failed to create employee - empty response')

        logger.info('Successfully created employee: %s', resp.data.id)
        return resp.data

    def delete(self, employee_id: str) -> str:
        logger.info('Deleting employee with id: %s', employee_id)

        name = self.get(employee_id).employee_name
        if name is None:
            raise EmployeeServiceError(f'Employee with id {employee_id} has no name to delete by')

        try:
            resp = self.retry.execute(lambda: self.employee_repo.delete(name))
        except (requests.RequestException, EnvelopeDecodeError, EmployeeServiceError) as err:
            raise self.upstream_error('to delete employee', err) from err

        if resp.data is not True:
            logger.error('Failed to delete employee with id: %s', employee_id)
            raise EmployeeServiceError(f'Failed to delete employee with id: {employee_id}')

        logger.info('Successfully deleted employee: %s', name)
        return name
