import re
from typing import Any, Collection, Dict, List, Mapping

_PATH_PARAM = re.compile(r":(\w+)")


def extract_path_params(path: str) -> List[str]:
    """Return the ``:name`` tokens of a path template, in template order.

    Repeated names are kept as found.
    """
    return _PATH_PARAM.findall(path)


def substitute_path_params(path: str, params: Mapping[str, Any]) -> str:
    """Replace every ``:name`` token with ``str(params[name])``.

    Callers are expected to have checked that every token has a value;
    a missing key raises ``KeyError``.
    """
    return _PATH_PARAM.sub(lambda match: str(params[match.group(1)]), path)


def strip_known_keys(data: Mapping[str, Any], names: Collection[str]) -> Dict[str, Any]:
    """Copy ``data`` without the keys in ``names``, keeping key order."""
    return {key: value for key, value in data.items() if key not in names}
