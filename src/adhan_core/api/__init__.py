"""Web API layer."""

from adhan_core.api.app import create_app
from adhan_core.api.dependencies import get_app_state

__all__ = ["create_app", "get_app_state"]
