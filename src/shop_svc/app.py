# SHOP Service: host-routed backend for the Ingress demo
from echo_common import ResponseTemplate, create_app, run

TEMPLATE = ResponseTemplate(
    "Hello from SHOP Service! This is the shop-svc running on port 80.\nWelcome to our online shop!\n"
)

# Flask app
app = create_app(__name__, TEMPLATE)


def main():
    run(app, display_name='SHOP Service', default_port=80)


if __name__ == "__main__":
    main()
