import logging
from collections.abc import Callable
from typing import Any, NoReturn, TypeVar

import requests

from models import ApiResponse

T = TypeVar('T')

logger = logging.getLogger(__name__)


class EnvelopeDecodeError(Exception):
    """The upstream answered successfully but its body could not be translated."""


class RestBaseRepository:
    def __init__(self, base_url: str, connect_timeout: float = 10.0, read_timeout: float = 10.0) -> None:
        self.base_url = base_url.rstrip('/')
        self.connect_timeout = connect_timeout
        self.read_timeout = read_timeout

    def send(self, method: str, url: str, data: dict[str, Any] | None = None) -> requests.Response:
        logger.debug('%s %s', method, url)
        resp = requests.request(method, url, json=data, timeout=(self.connect_timeout, self.read_timeout))

        if not resp.ok:
            self.unexpected_error(resp)

        return resp

    def unexpected_error(self, resp: requests.Response) -> NoReturn:
        resp.raise_for_status()
        raise requests.HTTPError(f'Unexpected status code {resp.status_code}', response=resp)

    def parse_envelope(self, resp: requests.Response, parse_data: Callable[[Any], T]) -> ApiResponse[T]:
        try:
            json = resp.json()
        except ValueError as err:
            raise EnvelopeDecodeError('Upstream response is not valid JSON') from err

        if not isinstance(json, dict):
            raise EnvelopeDecodeError('Upstream response is not a JSON object')

        data = json.get('data')
        return ApiResponse(
            data=None if data is None else parse_data(data),
            status=json.get('status'),
            error=json.get('error'),
        )
