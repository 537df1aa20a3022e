"""
Migration Wizard Validators

Input validation for prompts and answers files.
"""

import re
from pathlib import Path
from typing import Tuple

ENV_KEY_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def validate_framework(name: str) -> Tuple[bool, str]:
    """Validate a framework name.

    Args:
        name: Framework name as typed by the user

    Returns:
        Tuple of (is_valid, message)
    """
    if not name or not name.strip():
        return False, "Framework name is required"

    if "\n" in name or "\r" in name:
        return False, "Framework name must be a single line"

    if len(name) > 50:
        return False, "Framework name is too long (max 50 characters)"

    return True, "Valid framework name"


def validate_project_path(path: str) -> Tuple[bool, str]:
    """Validate that a path points at an existing directory.

    Args:
        path: Project directory path

    Returns:
        Tuple of (is_valid, message)
    """
    if not path:
        return False, "Project path is required"

    project = Path(path).expanduser()
    if not project.exists():
        return False, f"Project directory not found: {project}"
    if not project.is_dir():
        return False, f"Not a directory: {project}"

    return True, "Valid project directory"


def validate_env_key(key: str) -> Tuple[bool, str]:
    """Check that a variable name is usable with 'netlify env:set'.

    Args:
        key: Environment variable name

    Returns:
        Tuple of (is_valid, message)
    """
    if not key:
        return False, "Variable name is required"

    if not ENV_KEY_PATTERN.match(key):
        return False, "Use letters, digits and underscores, not starting with a digit"

    return True, "Valid variable name"
