from echo_common.config import ServerSettings
from echo_common.errors import StartupError
from echo_common.responder import ResponseTemplate, create_app
from echo_common.server import create_server, load_tls_context, run

__all__ = [
    "ResponseTemplate",
    "ServerSettings",
    "StartupError",
    "create_app",
    "create_server",
    "load_tls_context",
    "run",
]
