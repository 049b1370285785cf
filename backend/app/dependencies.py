from fastapi import Request

from app.config import Settings


def current_settings(request: Request) -> Settings:
    """The Settings snapshot the running app was built with."""
    return request.app.state.settings
