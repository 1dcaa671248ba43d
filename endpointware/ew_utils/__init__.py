"""Helpers behind the endpoint client.

Modules:
- env: environment helpers
- config: endpoint rule table loader
- paths: path template parameters
- params: query/form encoding helpers
- session: base URL and default headers
- auth: auth header refresh
- handlers: endpoint handler factory
"""

from .env import get_env_variable
from .config import build_rules, load_config
from .handlers import build_request, create_handler
from .session import ClientSession

__all__ = [
    "get_env_variable",
    "load_config",
    "build_rules",
    "build_request",
    "create_handler",
    "ClientSession",
]
