"""
YAML settings files.

``${VAR}`` and ``${VAR:default}`` references are replaced from the
environment before parsing. An unset variable without a default becomes
an empty string.
"""

import os
import re
from pathlib import Path
from typing import Any, Union

import yaml

from promptkit.core.exceptions import ConfigurationError

ENV_REFERENCE = re.compile(r"\$\{([^}:]+)(?::([^}]*))?\}")


def expand_env(text: str) -> str:
    """Replace ``${VAR[:default]}`` references in raw YAML text."""
    return ENV_REFERENCE.sub(
        lambda m: os.environ.get(m.group(1), m.group(2) or ""),
        text,
    )


def load_yaml(path: Union[str, Path]) -> dict[str, Any]:
    """
    Read a settings file into a dict.

    Args:
        path: File to read

    Returns:
        The parsed mapping; an empty file gives ``{}``

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigurationError: If the document is not a mapping
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"Config file not found: {file_path}")

    data = yaml.safe_load(expand_env(file_path.read_text())) or {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"{file_path} must contain a mapping, got {type(data).__name__}",
        )
    return data
