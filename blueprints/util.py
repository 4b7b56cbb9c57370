import json
import logging
from collections.abc import Callable
from typing import Any

import marshmallow
from flask import Blueprint, Response
from flask.views import MethodView
from tightwrap import wraps

from services import EmployeeNotFoundError, EmployeeServiceError

logger = logging.getLogger(__name__)


def class_route(blueprint: Blueprint, rule: str, **options: Any) -> Callable[[type[MethodView]], type[MethodView]]:  # noqa: ANN401
    def decorator(cls: type[MethodView]) -> type[MethodView]:
        blueprint.add_url_rule(rule, view_func=cls.as_view(cls.__name__), **options)
        return cls

    return decorator


def json_response(data: Any, status: int) -> Response:  # noqa: ANN401
    return Response(json.dumps(data), status=status, mimetype='application/json')


def error_response(msg: str, code: int) -> Response:
    return json_response({'message': msg, 'code': code}, code)


def validation_error_response(err: marshmallow.ValidationError) -> Response:
    return json_response({'message': 'Invalid request body.', 'code': 400, 'errors': err.normalized_messages()}, 400)


def handles_service_errors(f: Callable[..., Response]) -> Callable[..., Response]:
    @wraps(f)
    def decorated_function(*args, **kwargs) -> Response:  # type: ignore[no-untyped-def] # noqa: ANN002, ANN003
        try:
            return f(*args, **kwargs)
        except EmployeeNotFoundError as err:
            logger.warning('Employee not found: %s', err)
            return error_response(str(err), 404)
        except EmployeeServiceError as err:
            logger.exception('Employee service error: %s', err.message)
            return error_response(err.message, 500)

    return decorated_function
