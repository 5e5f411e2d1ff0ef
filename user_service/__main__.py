# External package imports
import uvicorn

# Local application imports
from .core.config import get_settings
from .main import create_application


def main() -> None:
    # create_application() loads .env before settings are first read
    application = create_application()
    settings = get_settings()
    uvicorn.run(application, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
