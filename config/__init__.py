"""Configuration package for interview simulator services."""
from .catalog import DOMAINS, ROLES
from .registry import GENERATE_KEY, bind_model, get_model, is_bound
from .routes import LlmRoute, route_from_settings
from .settings import Settings, settings

__all__ = [
    "DOMAINS",
    "ROLES",
    "GENERATE_KEY",
    "bind_model",
    "get_model",
    "is_bound",
    "LlmRoute",
    "route_from_settings",
    "Settings",
    "settings",
]
