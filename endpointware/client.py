import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import httpx
from dotenv import load_dotenv

from .application.models import EndpointRule
from .application.services.transport import HttpTransport
from .errors import ClientNotConfigured, UnknownEndpoint
from .ew_utils import build_rules, create_handler, get_env_variable, load_config
from .ew_utils.config import DEFAULT_CONFIG_DIR
from .ew_utils.env import get_env_float
from .ew_utils.handlers import Handler, Normalizer
from .ew_utils.session import COMMON_GROUP, ClientSession

logger = logging.getLogger("endpointware")

HEADER_CLIENT_KEY = "client_key"
HEADER_CLIENT_SECRET = "client_secret"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging from ``level`` or the LOG_LEVEL env var."""
    level_name = (level or get_env_variable("LOG_LEVEL") or "info").upper()
    logging.basicConfig(level=getattr(logging, level_name, logging.INFO))


class ApiClient:
    """Turns a table of named endpoint rules into async request handlers.

    Each client owns its own :class:`ClientSession`, so independent clients
    never share base URL or auth headers.
    """

    def __init__(
        self,
        rules: Mapping[str, Union[EndpointRule, Mapping[str, Any]]],
        base_url: str = "",
        headers: Optional[Mapping[str, Mapping[str, Optional[str]]]] = None,
        transport: Optional[HttpTransport] = None,
        session: Optional[ClientSession] = None,
    ):
        self.rules: Dict[str, EndpointRule] = build_rules(rules)
        self.session = session or ClientSession(base_url, headers)
        self.transport = transport or HttpTransport()

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.transport.aclose()

    def get_url(self) -> str:
        return self.session.get_url()

    def set_url(self, url: Optional[str]) -> None:
        self.session.set_url(url)

    def get_header(self, name: str, group: str = COMMON_GROUP) -> Optional[str]:
        return self.session.get_header(name, group)

    def set_header(self, name: str, value: Optional[str] = None, group: str = COMMON_GROUP) -> None:
        self.session.set_header(name, value, group)

    def endpoint(self, name: str, normalize: Optional[Normalizer] = None) -> Handler:
        """Resolve ``name`` to a request handler.

        Raises ``UnknownEndpoint`` for names missing from the rule table and
        ``ClientNotConfigured`` while the base URL is empty. No request is
        made here.
        """
        rule = self.rules.get(name)
        if rule is None:
            raise UnknownEndpoint(name)

        if not self.session.get_url():
            raise ClientNotConfigured()

        return self.create_endpoint(name, rule, normalize)

    def create_endpoint(
        self,
        name: str,
        rule: Union[EndpointRule, Mapping[str, Any]],
        normalize: Optional[Normalizer] = None,
    ) -> Handler:
        """Build a handler for ``rule`` without looking it up in the table."""
        if not isinstance(rule, EndpointRule):
            rule = build_rules({name: rule})[name]
        return create_handler(name, rule, self.session, self.transport, normalize)


def create_client(
    config_dir: Optional[Union[str, Path]] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> ApiClient:
    """Build an :class:`ApiClient` from environment configuration.

    Reads API_URL, API_CLIENT_KEY, API_CLIENT_SECRET, API_TIMEOUT and
    ENDPOINTS_CONFIG_DIR (after loading a ``.env`` file if present).

    A ``client`` passed in is handed over to the transport: closing the
    returned ``ApiClient`` (``aclose`` or ``async with``) closes it too.
    """
    load_dotenv()

    config_dir = config_dir or get_env_variable("ENDPOINTS_CONFIG_DIR") or DEFAULT_CONFIG_DIR
    logger.info("Loading endpoint rules from: %s", config_dir)
    rules = load_config(config_dir)
    logger.info("Loaded %d endpoint(s)", len(rules))

    common: Dict[str, Optional[str]] = {}
    client_key = get_env_variable("API_CLIENT_KEY")
    if client_key:
        common[HEADER_CLIENT_KEY] = client_key
    client_secret = get_env_variable("API_CLIENT_SECRET")
    if client_secret:
        common[HEADER_CLIENT_SECRET] = client_secret

    transport = HttpTransport(timeout=get_env_float("API_TIMEOUT", 30.0), client=client)

    return ApiClient(
        rules,
        base_url=get_env_variable("API_URL"),
        headers={COMMON_GROUP: common},
        transport=transport,
    )
