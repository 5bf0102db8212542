"""Flask app that answers every request with one fixed plain-text body."""

from dataclasses import dataclass

from flask import Flask, Response, request
from werkzeug.exceptions import MethodNotAllowed, NotFound

ALL_METHODS = ['GET', 'HEAD', 'POST', 'PUT', 'PATCH', 'DELETE', 'OPTIONS']


@dataclass(frozen=True)
class ResponseTemplate:
    body: str
    content_type: str = 'text/plain'

    def render(self, path):
        """Return the body with {path} replaced by the request target"""
        return self.body.replace('{path}', path)


def request_target():
    """Request target exactly as the client sent it, query string included"""
    raw = request.environ.get('RAW_URI') or request.environ.get('REQUEST_URI')
    if raw:
        # WSGI hands over the raw bytes decoded as latin-1
        return raw.encode('latin-1').decode('utf-8', 'replace')
    return request.full_path.rstrip('?')


def create_app(import_name, template):
    """Build an app that returns template for any method and path"""
    app = Flask(import_name)

    def respond():
        return Response(
            template.render(request_target()),
            status=200,
            content_type=template.content_type,
        )

    @app.route('/', defaults={'path': ''}, methods=ALL_METHODS)
    @app.route('/<path:path>', methods=ALL_METHODS)
    def echo(path):
        return respond()

    # Methods outside ALL_METHODS and paths the catch-all cannot match get the same answer
    @app.errorhandler(MethodNotAllowed)
    @app.errorhandler(NotFound)
    def echo_unrouted(error):
        return respond()

    return app
