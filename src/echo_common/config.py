import os
from dataclasses import dataclass

from echo_common.errors import StartupError

DEFAULT_HOST = '0.0.0.0'

# Key names of a kubernetes.io/tls secret mounted at /etc/tls
DEFAULT_CERT_FILE = '/etc/tls/tls.crt'
DEFAULT_KEY_FILE = '/etc/tls/tls.key'


@dataclass(frozen=True)
class ServerSettings:
    host: str
    port: int
    cert_file: str = DEFAULT_CERT_FILE
    key_file: str = DEFAULT_KEY_FILE

    @classmethod
    def from_env(cls, default_port):
        """Read listener settings from the environment"""
        return cls(
            host=os.getenv('HOST') or DEFAULT_HOST,
            port=parse_port(os.getenv('PORT'), default_port),
            cert_file=os.getenv('TLS_CERT_FILE') or DEFAULT_CERT_FILE,
            key_file=os.getenv('TLS_KEY_FILE') or DEFAULT_KEY_FILE,
        )


def parse_port(value, default_port):
    """Parse a PORT value, falling back to default_port when unset or empty"""
    if value is None or not value.strip():
        return default_port

    try:
        port = int(value)
    except ValueError:
        raise StartupError(f"PORT must be an integer, got {value!r}") from None

    if not 0 <= port <= 65535:
        raise StartupError(f"PORT out of range: {port}")
    return port
