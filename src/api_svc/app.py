# API Service echoes the request path so path-based Ingress rules can be checked
from echo_common import ResponseTemplate, create_app, run

TEMPLATE = ResponseTemplate(
    "Hello from API Service! This is the api-svc running on port 80.\nPath: {path}\n"
)

# Flask app
app = create_app(__name__, TEMPLATE)


def main():
    run(app, display_name='API Service', default_port=80)


if __name__ == "__main__":
    main()
