import logging
import ssl
import sys

from werkzeug.serving import make_server

from echo_common.config import ServerSettings
from echo_common.errors import StartupError
from echo_common.logging_utils import configure_logging

logger = logging.getLogger(__name__)


def load_tls_context(cert_file, key_file):
    """Load the certificate/key pair into a server-side SSL context"""
    context = ssl.SSLContext(ssl.PROTOCOL_TLS_SERVER)
    try:
        context.load_cert_chain(certfile=cert_file, keyfile=key_file)
    except OSError as e:
        raise StartupError(
            f"Failed to load TLS credentials from {cert_file} and {key_file}: {e}"
        ) from e
    return context


def create_server(app, host, port, ssl_context=None):
    """Bind a threaded WSGI server; exits the process if the port is unavailable"""
    try:
        return make_server(host, port, app, threaded=True, ssl_context=ssl_context)
    except SystemExit:
        # Werkzeug prints the bind error and calls sys.exit(1) itself
        logger.error(f"Could not bind {host}:{port}")
        raise
    except OSError as e:
        logger.error(f"Could not bind {host}:{port}: {e}")
        sys.exit(1)


def run(app, display_name, default_port, tls=False):
    """Start one echo service and serve until the process is terminated"""
    try:
        configure_logging()
        settings = ServerSettings.from_env(default_port)
        ssl_context = None
        if tls:
            ssl_context = load_tls_context(settings.cert_file, settings.key_file)
    except StartupError as e:
        logger.error(f"{display_name} failed to start: {e}")
        sys.exit(1)

    server = create_server(app, settings.host, settings.port, ssl_context)
    logger.info(f"{display_name} running on port {server.server_port}")

    try:
        server.serve_forever()
    finally:
        server.server_close()
