import importlib
import sys

import pytest


@pytest.mark.parametrize(
    "module",
    [
        "endpointware",
        "endpointware.ew_utils",
        "endpointware.ew_utils.handlers",
        "endpointware.application.services.transport",
    ],
)
def test_package_imports_from_a_clean_state(monkeypatch, module):
    for name in [n for n in sys.modules if n == "endpointware" or n.startswith("endpointware.")]:
        monkeypatch.delitem(sys.modules, name)

    imported = importlib.import_module(module)

    assert imported.__name__ == module


def test_top_level_exports():
    import endpointware

    assert callable(endpointware.ApiClient)
    assert callable(endpointware.HttpTransport)
    assert callable(endpointware.create_client)
