from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, Dict, List, Literal, Optional, Tuple
from datetime import datetime


HttpMethod = Literal["get", "post", "put", "patch", "delete"]
BodyType = Literal["json", "form"]

BODY_METHODS = frozenset({"post", "put", "patch"})
QUERY_METHODS = frozenset({"get", "delete"})


class EndpointRule(BaseModel):
    """Static descriptor of one API operation."""

    model_config = ConfigDict(frozen=True)

    path: str
    method: HttpMethod
    type: Optional[BodyType] = None
    auth: bool = False
    description: str = ""
    tags: Tuple[str, ...] = ()

    @field_validator("method", mode="before")
    @classmethod
    def _lower_method(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @property
    def is_form(self) -> bool:
        return self.type == "form"


class PreparedRequest(BaseModel):
    """A fully shaped request, ready to hand to the transport.

    ``url`` is relative to the session base URL. At most one of ``params``,
    ``json_body`` and ``form`` is set, depending on the rule's method and type.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    endpoint: str
    method: HttpMethod
    url: str
    headers: Dict[str, str] = Field(default_factory=dict)
    params: Optional[List[Tuple[str, Any]]] = None
    json_body: Optional[Dict[str, Any]] = None
    form: Optional[List[Tuple[str, Any]]] = None


class EndpointResponse(BaseModel):
    endpoint: str
    status_code: int
    data: Any
    headers: Dict[str, str]
    execution_time_ms: float
    timestamp: datetime
