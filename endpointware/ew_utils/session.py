import logging
from typing import Dict, Mapping, Optional

logger = logging.getLogger("endpointware.session")

COMMON_GROUP = "common"
DEFAULT_ACCEPT = "application/json, text/plain, */*"


class ClientSession:
    """Base URL and default outgoing headers for one API client.

    Headers are grouped: ``common`` applies to every request, while a group
    named after an HTTP method (``get``, ``post``, ...) applies only to
    requests of that method and wins over ``common``.

    The session is shared by every handler created from the same client and
    is mutated without locking. When concurrent requests each refresh the
    auth headers, the last response to complete wins.
    """

    def __init__(self, base_url: str = "", headers: Optional[Mapping[str, Mapping[str, Optional[str]]]] = None):
        self.base_url = base_url or ""
        self.headers: Dict[str, Dict[str, Optional[str]]] = {
            COMMON_GROUP: {"Accept": DEFAULT_ACCEPT},
        }
        for group, values in (headers or {}).items():
            self.headers.setdefault(group, {}).update(values)

    def get_url(self) -> str:
        return self.base_url

    def set_url(self, url: Optional[str]) -> None:
        self.base_url = url or ""

    def get_header(self, name: str, group: str = COMMON_GROUP) -> Optional[str]:
        return self.headers.get(group, {}).get(name)

    def set_header(self, name: str, value: Optional[str] = None, group: str = COMMON_GROUP) -> None:
        """Set a default header; ``None`` clears it for later requests."""
        self.headers.setdefault(group, {})[name] = value
        if value is None:
            logger.debug("Cleared header '%s' in group '%s'", name, group)

    def headers_for(self, method: str) -> Dict[str, str]:
        """Merge ``common`` and the method group, dropping cleared headers."""
        merged: Dict[str, str] = {}
        for group in (COMMON_GROUP, method.lower()):
            for name, value in self.headers.get(group, {}).items():
                if value is None:
                    merged.pop(name, None)
                else:
                    merged[name] = str(value)
        return merged
