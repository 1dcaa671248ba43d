import os
import logging

LOGGER = logging.getLogger("endpointware.env")

def get_env_variable(var_name: str) -> str:
    """Return an environment variable or empty string if unset."""
    value = os.environ.get(var_name, "")
    if not value:
        LOGGER.debug("Env '%s' not set or empty", var_name)
    return value


def get_env_float(var_name: str, default: float) -> float:
    """Read a float from the environment, falling back to ``default``."""
    raw = get_env_variable(var_name).strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        LOGGER.warning("Env '%s' is not a number (%r), using %s", var_name, raw, default)
        return default
