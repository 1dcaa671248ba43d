import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Union

from pydantic import ValidationError

from ..application.models import EndpointRule
from ..errors import InvalidEndpointRule

LOGGER = logging.getLogger("endpointware.config")

DEFAULT_CONFIG_DIR = Path(__file__).resolve().parent.parent / "config" / "endpoints"


def load_config(config_dir: Union[str, Path] = DEFAULT_CONFIG_DIR) -> Dict[str, EndpointRule]:
    """Load the endpoint rule table from an organized folder structure.

    Args:
        config_dir: Directory holding one folder per tag, each containing one
            JSON file per endpoint

    Returns:
        Dictionary mapping endpoint names to their rules. The endpoint name is
        the file name without ``.json``:
        {
            "getLoad": EndpointRule(path="/loads/:id", method="get", tags=("loads",))
        }
    """
    config_path = Path(config_dir)

    if not config_path.exists():
        raise RuntimeError(f"Config directory not found: {config_dir}")

    result: Dict[str, EndpointRule] = {}

    tag_dirs = sorted([d for d in config_path.iterdir() if d.is_dir()], key=lambda x: x.name.lower())
    for tag_dir in tag_dirs:
        tag_name = tag_dir.name

        rule_files = sorted(tag_dir.glob("*.json"), key=lambda x: x.name.lower())
        for rule_file in rule_files:
            name = rule_file.stem

            if name in result:
                raise InvalidEndpointRule(f"Duplicate endpoint '{name}' in {rule_file}")

            try:
                with open(rule_file, "r", encoding="utf-8") as f:
                    raw = json.load(f)
            except json.JSONDecodeError as e:
                raise InvalidEndpointRule(f"Error loading endpoint rule {rule_file}: {e}") from e

            result[name] = _build_rule(name, {"tags": [tag_name], **raw})

    LOGGER.debug("Loaded %d endpoint rule(s) from %s", len(result), config_path)
    return result


def build_rules(rules: Mapping[str, Union[EndpointRule, Mapping[str, Any]]]) -> Dict[str, EndpointRule]:
    """Validate an in-memory rule table (plain dicts or ``EndpointRule``)."""
    return {
        name: rule if isinstance(rule, EndpointRule) else _build_rule(name, rule)
        for name, rule in rules.items()
    }


def _build_rule(name: str, raw: Mapping[str, Any]) -> EndpointRule:
    try:
        return EndpointRule.model_validate(raw)
    except ValidationError as e:
        raise InvalidEndpointRule(f"Invalid rule for endpoint '{name}': {e}") from e
