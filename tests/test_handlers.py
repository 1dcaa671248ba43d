import pytest

from endpointware import EndpointRule, MissingPathParam
from endpointware.ew_utils import ClientSession, build_request


@pytest.fixture
def session() -> ClientSession:
    return ClientSession("https://api.example.com", {"common": {"access-token": "T"}})


def test_patch_rule_moves_residual_payload_to_body(session):
    rule = EndpointRule(path="/loads/:id", method="patch")

    request = build_request("updateLoad", rule, session, {"id": 5, "extra": "data"})

    assert request.url == "/loads/5"
    assert request.method == "patch"
    assert request.json_body == {"extra": "data"}
    assert request.params is None
    assert request.form is None


def test_get_rule_moves_payload_to_query(session):
    rule = EndpointRule(path="/profile", method="get")

    request = build_request("getProfile", rule, session, {"email": "a@b.c"})

    assert request.url == "/profile"
    assert request.params == [("email", "a@b.c")]
    assert request.json_body is None
    assert request.form is None


def test_form_rule_builds_multipart_fields(session):
    rule = EndpointRule(path="/loads/:id", method="post", type="form")

    request = build_request("createStop", rule, session, {"id": 5, "city": "Austin"})

    assert request.form == [("city", (None, "Austin"))]
    assert request.json_body is None


def test_delete_without_payload_has_empty_query(session):
    rule = EndpointRule(path="/auth/sign_out", method="DELETE")

    request = build_request("logout", rule, session)

    assert request.method == "delete"
    assert request.params == []


def test_request_snapshots_session_headers(session):
    rule = EndpointRule(path="/profile", method="get")

    request = build_request("getProfile", rule, session)
    session.set_header("access-token", "rotated")

    assert request.headers["access-token"] == "T"
    assert build_request("getProfile", rule, session).headers["access-token"] == "rotated"


def test_identical_calls_build_identical_requests(session):
    rule = EndpointRule(path="/loads/:id", method="patch")
    payload = {"id": 5, "extra": "data"}

    first = build_request("updateLoad", rule, session, payload)
    second = build_request("updateLoad", rule, session, payload)

    assert first == second
    assert payload == {"id": 5, "extra": "data"}


def test_missing_path_param_raises(session):
    rule = EndpointRule(path="/loads/:load_id/stops/:id", method="get")

    with pytest.raises(MissingPathParam) as exc_info:
        build_request("getStop", rule, session, {"load_id": 1})

    assert exc_info.value.name == "getStop"
    assert exc_info.value.param == "id"


def test_falsy_path_param_values_are_substituted(session):
    rule = EndpointRule(path="/loads/:id", method="get")

    assert build_request("getLoad", rule, session, {"id": 0}).url == "/loads/0"
