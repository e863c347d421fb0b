"""Environment variable expansion for configuration values."""
import os
import re
from typing import Any

# ${VAR}, ${VAR:default} or $VAR
_ENV_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)(?::([^}]*))?\}|\$([A-Za-z_][A-Za-z0-9_]*)")


def _replace(match: "re.Match[str]") -> str:
    braced_name, default, bare_name = match.groups()
    name = braced_name or bare_name
    if name in os.environ:
        return os.environ[name]
    if default is not None:
        return default
    return match.group(0)


def expand_env_vars(value: Any) -> Any:
    """
    Expand environment variables in strings, recursing into dicts and lists.

    Unset variables without a default are left as written.

    Args:
        value: String, dict, list or any other value
    Returns:
        Value with variables expanded
    """
    if isinstance(value, str):
        return _ENV_PATTERN.sub(_replace, value)
    if isinstance(value, dict):
        return {key: expand_env_vars(item) for key, item in value.items()}
    if isinstance(value, list):
        return [expand_env_vars(item) for item in value]
    return value


def expand_config_env_vars(config: dict) -> dict:
    """Expand environment variables across a whole configuration dictionary."""
    return expand_env_vars(config)
