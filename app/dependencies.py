from fastapi import Request

from app.containers import AppContainer


def get_container(request: Request) -> AppContainer:
    return request.app.state.container


def get_owner_id(request: Request) -> str | None:
    """The soft owner identity carried by the caller's cookie, if any."""
    name = request.app.state.container.settings.owner_cookie_name
    return request.cookies.get(name) or None
