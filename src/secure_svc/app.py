# SECURE Service: HTTPS backend, credentials come from TLS_CERT_FILE / TLS_KEY_FILE
from echo_common import ResponseTemplate, create_app, run

TEMPLATE = ResponseTemplate(
    "Hello from SECURE Service! This is the secure-svc running on port 443.\nThis is a secure HTTPS connection.\n"
)

# Flask app
app = create_app(__name__, TEMPLATE)


def main():
    run(app, display_name='SECURE Service', default_port=443, tls=True)


if __name__ == "__main__":
    main()
