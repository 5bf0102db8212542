# WEB Service: host-routed backend for the Ingress demo
from echo_common import ResponseTemplate, create_app, run

TEMPLATE = ResponseTemplate(
    "Hello from WEB Service! This is the web-svc running on port 80.\nServing web content.\n"
)

# Flask app
app = create_app(__name__, TEMPLATE)


def main():
    run(app, display_name='WEB Service', default_port=80)


if __name__ == "__main__":
    main()
