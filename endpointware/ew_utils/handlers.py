import logging
from datetime import datetime
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Dict, Mapping, Optional

import httpx

from ..application.models import (
    BODY_METHODS,
    QUERY_METHODS,
    EndpointResponse,
    EndpointRule,
    PreparedRequest,
)
from ..errors import MissingPathParam, NotAuthenticated
from .auth import has_access_token, refresh_auth_headers
from .params import encode_form, encode_query
from .paths import extract_path_params, strip_known_keys, substitute_path_params
from .session import ClientSession

if TYPE_CHECKING:
    from ..application.services.transport import HttpTransport

LOGGER = logging.getLogger("endpointware.handlers")

Normalizer = Callable[[Any, Mapping[str, str]], Any]
Handler = Callable[..., Awaitable[EndpointResponse]]


def _decode_body(resp: httpx.Response) -> Any:
    if not resp.content:
        return None
    try:
        return resp.json()
    except ValueError:
        return resp.text


def build_request(
    name: str,
    rule: EndpointRule,
    session: ClientSession,
    payload: Optional[Mapping[str, Any]] = None,
) -> PreparedRequest:
    """Shape one call of ``rule`` into a transport-ready request.

    Path parameters are filled from ``payload`` and removed from it; what is
    left goes to the query string for get/delete and to the body for
    post/put/patch. ``payload`` itself is never modified.
    """
    data: Mapping[str, Any] = payload or {}

    url = rule.path
    residual: Dict[str, Any] = dict(data)
    path_params = extract_path_params(rule.path)
    if path_params:
        for param in path_params:
            if data.get(param) is None:
                raise MissingPathParam(name, param)
        url = substitute_path_params(rule.path, data)
        residual = strip_known_keys(data, path_params)

    request = PreparedRequest(
        endpoint=name,
        method=rule.method,
        url=url,
        headers=session.headers_for(rule.method),
    )

    if rule.method in BODY_METHODS:
        if rule.is_form:
            request.form = encode_form(residual)
        else:
            request.json_body = residual
    elif rule.method in QUERY_METHODS:
        request.params = encode_query(residual)

    return request


def create_handler(
    name: str,
    rule: EndpointRule,
    session: ClientSession,
    transport: "HttpTransport",
    normalize: Optional[Normalizer] = None,
) -> Handler:
    """Factory that creates the async request handler for one endpoint rule.

    Every successful response may rotate the session's auth headers, which
    then apply to all later requests made through the same session.
    """

    async def handler(payload: Optional[Mapping[str, Any]] = None) -> EndpointResponse:
        request = build_request(name, rule, session, payload)

        if rule.auth and not has_access_token(session):
            raise NotAuthenticated(name)

        start_time = datetime.now()
        resp = await transport.send(session, request)
        execution_time = (datetime.now() - start_time).total_seconds() * 1000

        refresh_auth_headers(session, resp.headers)

        body = _decode_body(resp)
        if normalize is not None:
            body = normalize({} if body is None else body, resp.headers)

        LOGGER.debug("Endpoint '%s' answered %s in %.1f ms", name, resp.status_code, execution_time)

        return EndpointResponse(
            endpoint=name,
            status_code=resp.status_code,
            data=body,
            headers=dict(resp.headers),
            execution_time_ms=execution_time,
            timestamp=start_time,
        )

    handler.__name__ = name
    handler.__doc__ = rule.description or f"{rule.method.upper()} {rule.path}"
    return handler
