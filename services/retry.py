import logging
import threading
import time
from collections.abc import Callable
from enum import Enum
from typing import TypeVar

import requests
from tenacity import RetryCallState, RetryError, Retrying, retry_if_exception, stop_after_attempt, wait_incrementing

from .errors import EmployeeServiceError

T = TypeVar('T')

logger = logging.getLogger(__name__)

TOO_MANY_REQUESTS = requests.codes.too_many_requests


class FailureKind(Enum):
    RETRYABLE_STATUS = 'retryable_status'
    TERMINAL_STATUS = 'terminal_status'
    UNREACHABLE = 'unreachable'


def status_of(exc: requests.RequestException | None) -> int | None:
    if exc is None or exc.response is None:
        return None
    return exc.response.status_code


def classify_failure(exc: requests.RequestException) -> FailureKind:
    status = status_of(exc)

    if status is None:
        return FailureKind.UNREACHABLE

    if status == TOO_MANY_REQUESTS or status >= 500:  # noqa: PLR2004
        return FailureKind.RETRYABLE_STATUS

    return FailureKind.TERMINAL_STATUS


def is_retryable(exc: BaseException) -> bool:
    return isinstance(exc, requests.RequestException) and classify_failure(exc) != FailureKind.TERMINAL_STATUS


class RetryPolicy:
    """
    Runs one-attempt operations against the upstream store with bounded retries.

    Rate limiting (429), server errors (5xx) and connectivity failures are retried up
    to ``max_attempts`` attempts in total, waiting ``base_delay * attempt`` seconds
    after each failed attempt. Any other HTTP error is re-raised as is, without
    waiting. When the attempts run out an ``EmployeeServiceError`` is raised with the
    last failure as its cause.
    """

    def __init__(
        self,
        max_attempts: int = 3,
        base_delay: float = 1.0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if max_attempts < 1:
            raise ValueError('max_attempts must be at least 1')

        self.max_attempts = max_attempts
        self.base_delay = base_delay
        self.sleep = sleep

    def execute(self, operation: Callable[[], T], cancel_event: threading.Event | None = None) -> T:
        failures: list[BaseException] = []

        def log_retry(retry_state: RetryCallState) -> None:
            err = retry_state.outcome.exception() if retry_state.outcome else None
            if err is not None:
                failures.append(err)

            status = status_of(err) if isinstance(err, requests.RequestException) else None
            logger.warning(
                'Request failed with %s. Retrying... (attempt %d/%d)',
                f'status {status}' if status is not None else type(err).__name__,
                retry_state.attempt_number,
                self.max_attempts,
            )

        def wait(delay: float) -> None:
            if cancel_event is None:
                self.sleep(delay)
            elif cancel_event.wait(delay):
                raise EmployeeServiceError('Retry interrupted') from failures[-1]

        retrying = Retrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_incrementing(start=self.base_delay, increment=self.base_delay),
            retry=retry_if_exception(is_retryable),
            before_sleep=log_retry,
            sleep=wait,
        )

        try:
            return retrying(operation)
        except RetryError as err:
            last_error = err.last_attempt.exception()
            logger.error('All %d retry attempts failed', self.max_attempts)
            raise EmployeeServiceError(
                f'Failed after {self.max_attempts} attempts',
                status_code=status_of(last_error) if isinstance(last_error, requests.RequestException) else None,
            ) from last_error
