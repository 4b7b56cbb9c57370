import os

from flask import Flask
from gcp_microservice_utils import setup_cloud_logging, setup_cloud_trace

from blueprints import BlueprintEmployee, BlueprintHealth
from containers import Container

EMPLOYEE_SVC_SETTINGS = (
    ('EMPLOYEE_SVC_URL', 'url', str),
    ('EMPLOYEE_SVC_CONNECT_TIMEOUT', 'connect_timeout', float),
    ('EMPLOYEE_SVC_READ_TIMEOUT', 'read_timeout', float),
    ('EMPLOYEE_SVC_MAX_ATTEMPTS', 'max_attempts', int),
    ('EMPLOYEE_SVC_RETRY_DELAY_MS', 'retry_delay_ms', float),
)


class FlaskMicroservice(Flask):
    container: Container


def create_app() -> FlaskMicroservice:
    if os.getenv('ENABLE_CLOUD_LOGGING') == '1':
        setup_cloud_logging()  # pragma: no cover

    app = FlaskMicroservice(__name__)
    app.container = Container()

    for env_name, option, cast in EMPLOYEE_SVC_SETTINGS:
        if env_name in os.environ:
            app.container.config.svc.employee[option].from_env(env_name, as_=cast)

    if os.getenv('ENABLE_CLOUD_TRACE') == '1':  # pragma: no cover
        setup_cloud_trace(app)

    app.register_blueprint(BlueprintHealth)
    app.register_blueprint(BlueprintEmployee)

    return app
