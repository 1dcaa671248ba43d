"""Declarative HTTP API client built from named endpoint rules."""

from .client import ApiClient, configure_logging, create_client
from .application.models import EndpointResponse, EndpointRule, PreparedRequest
from .application.services.transport import HttpTransport
from .ew_utils.auth import HEADER_ACCESS_TOKEN, HEADER_CLIENT, HEADER_UID
from .ew_utils.paths import extract_path_params, strip_known_keys, substitute_path_params
from .ew_utils.session import ClientSession
from .errors import (
    ApiError,
    ClientNotConfigured,
    InvalidEndpointRule,
    MissingPathParam,
    NotAuthenticated,
    UnknownEndpoint,
)

__all__ = [
    "ApiClient",
    "configure_logging",
    "create_client",
    "EndpointResponse",
    "EndpointRule",
    "PreparedRequest",
    "HttpTransport",
    "ClientSession",
    "HEADER_ACCESS_TOKEN",
    "HEADER_CLIENT",
    "HEADER_UID",
    "extract_path_params",
    "strip_known_keys",
    "substitute_path_params",
    "ApiError",
    "ClientNotConfigured",
    "InvalidEndpointRule",
    "MissingPathParam",
    "NotAuthenticated",
    "UnknownEndpoint",
]
