import os
import sys
from collections.abc import Mapping


def get_effective_config_value(name: str, config: dict) -> str | None:
    """
    Returns the effective configuration value for a given name, following priority:
        1. Command-line parameter (--name=value)
        2. Config file value (case-insensitive)
        3. System environment variable (case-insensitive)

    Args:
        name (str): Variable name (case-insensitive, e.g. "BASE_URL")
        config (dict): Configuration dictionary loaded from config.json

    Returns:
        str | None: Effective value or None if not found
    """
    name_lower = name.lower()

    # 1️ Command-line via raw sys.argv (--name=value)
    for arg in sys.argv:
        if arg.startswith("--") and "=" in arg:
            arg_name, arg_val = arg[2:].split("=", 1)
            if arg_name.lower() == name_lower:
                return arg_val.strip()

    # 2️ Config file
    for key, value in config.items():
        if key.lower() == name_lower and value is not None:
            return str(value)

    # 3️ Environment variable
    for key, value in os.environ.items():
        if key.lower() == name_lower:
            return str(value)

    return None


def get_mapping_value_ignore_case(mapping: Mapping, name: str, default=None):
    """
    Look up a key in a mapping without caring about its representation.

    The exact key wins, then any key whose string form equals the name,
    then any key whose string form equals the name case-insensitively.

    Example:
        get_mapping_value_ignore_case({"ID": 7}, "id")
        → 7
    """
    if name in mapping:
        return mapping[name]

    name_lower = name.lower()
    case_insensitive_match = default

    for key, value in mapping.items():
        key_text = str(key)
        if key_text == name:
            return value
        if case_insensitive_match is default and key_text.lower() == name_lower:
            case_insensitive_match = value

    return case_insensitive_match


def has_public_attribute(obj, name: str) -> bool:
    """Return True if the object exposes a non-private attribute or reader with that name."""
    if name.startswith("_"):
        return False

    try:
        getattr(obj, name)
    except AttributeError:
        return False
    return True
