# External package imports
from fastapi import Request

# Local application imports
from ...di.container import DIContainer


def get_container(request: Request) -> DIContainer:
    """
    FastAPI dependency returning the DI container the application was built with

    Args:
        request: Incoming request (gives access to app.state)

    Returns:
        DIContainer stored on the application at creation time
    """
    return request.app.state.container
