"""
Settings for the dd backend, read from the environment with local dev defaults.
"""

import os

from pydantic import Field
from pydantic_settings import BaseSettings

DEFAULT_MONGODB_URI = "mongodb://localhost:27017/dd_db"


def get_mongodb_uri() -> str:
    """Return MONGODB_URI if set and non-empty, else the local default."""
    return os.getenv("MONGODB_URI") or DEFAULT_MONGODB_URI


class Settings(BaseSettings):
    # App
    app_name: str = "dd-backend"
    app_version: str = "0.1.0"
    debug: bool = False

    # MongoDB, read from the unprefixed MONGODB_URI
    mongodb_uri: str = Field(default_factory=get_mongodb_uri, validation_alias="MONGODB_URI")

    model_config = {"env_prefix": "DD_", "env_ignore_empty": True}


def get_settings() -> Settings:
    return Settings()


def redact_uri(uri: str) -> str:
    """Mask the password in a connection string so it can be logged."""
    scheme, sep, rest = uri.partition("://")
    if not sep:
        return uri
    authority, slash, tail = rest.partition("/")
    userinfo, at, hosts = authority.rpartition("@")
    if not at or ":" not in userinfo:
        return uri
    user = userinfo.split(":", 1)[0]
    return f"{scheme}://{user}:***@{hosts}{slash}{tail}"


def database_name(uri: str) -> str:
    """
    Database segment of a connection string, or "" when there is none.

    mongodb://mongo:27017/dd_db?retryWrites=true -> "dd_db"
    """
    _, sep, rest = uri.partition("://")
    if not sep:
        return ""
    _, slash, tail = rest.partition("/")
    if not slash:
        return ""
    return tail.split("?", 1)[0]
