# External package imports
from fastapi import Request

# Local application imports
from ...di.base_container import BaseContainer


def get_container(request: Request) -> BaseContainer:
    """
    FastAPI dependency returning the DI container built for this application

    The container is created in create_application() and stored on app.state,
    so each app instance (and each test) carries its own wiring.
    """
    return request.app.state.container
