from flask import Blueprint, Response
from flask.views import MethodView

from .util import class_route, json_response

blp = Blueprint('Health', __name__)


@class_route(blp, '/health')
class Health(MethodView):
    init_every_request = False

    def get(self) -> Response:
        return json_response({'status': 'ok'}, 200)
