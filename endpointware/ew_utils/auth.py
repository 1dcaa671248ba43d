import logging
from typing import List, Mapping

from .session import ClientSession

logger = logging.getLogger("endpointware.auth")

HEADER_ACCESS_TOKEN = "access-token"
HEADER_UID = "uid"
HEADER_CLIENT = "client"

AUTH_HEADERS = (HEADER_ACCESS_TOKEN, HEADER_UID, HEADER_CLIENT)


def refresh_auth_headers(session: ClientSession, response_headers: Mapping[str, str]) -> List[str]:
    """Copy rotated auth headers from a response into the session defaults.

    Only non-empty values overwrite. Returns the names that were updated.
    """
    updated = []
    for name in AUTH_HEADERS:
        value = response_headers.get(name)
        if value:
            session.set_header(name, value)
            updated.append(name)
    if updated:
        logger.debug("Refreshed auth headers: %s", ", ".join(updated))
    return updated


def has_access_token(session: ClientSession) -> bool:
    """Whether requests from this session will carry an access token."""
    return bool(session.get_header(HEADER_ACCESS_TOKEN))
