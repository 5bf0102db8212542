# NGINX Service: default backend for the Ingress demo
from echo_common import ResponseTemplate, create_app, run

TEMPLATE = ResponseTemplate(
    "Hello from NGINX Service! This is the nginx-svc running on port 80.\n"
)

# Flask app
app = create_app(__name__, TEMPLATE)


def main():
    run(app, display_name='NGINX Service', default_port=80)


if __name__ == "__main__":
    main()
