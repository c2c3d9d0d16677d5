"""Environment variable expansion for configuration values."""

import os
import re
from typing import Any, Dict

# ${VAR:default} is handled here; plain $VAR and ${VAR} go through os.path.expandvars
_DEFAULT_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*):([^}]*)\}")


def _expand_string(value: str) -> str:
    def _replace(match: "re.Match[str]") -> str:
        return os.environ.get(match.group(1), match.group(2))

    return os.path.expandvars(_DEFAULT_PATTERN.sub(_replace, value))


def expand_env_vars(value: Any) -> Any:
    """
    Recursively expand environment variables.

    Strings, and strings nested in dicts and lists, have ``$VAR``,
    ``${VAR}`` and ``${VAR:default}`` references replaced. Unset variables
    without a default are left as written. Other values are returned
    unchanged.
    """
    if isinstance(value, str):
        return _expand_string(value)
    if isinstance(value, dict):
        return {key: expand_env_vars(item) for key, item in value.items()}
    if isinstance(value, list):
        return [expand_env_vars(item) for item in value]
    return value


def expand_config_env_vars(config: Dict[str, Any]) -> Dict[str, Any]:
    """Expand environment variables across a whole configuration mapping."""
    return expand_env_vars(config)
