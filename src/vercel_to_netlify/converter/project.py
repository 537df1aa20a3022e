"""
Project Migration

Reads Vercel files from a project directory and writes the Netlify
equivalents next to them.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from vercel_to_netlify.converter.checklist import (
    CHECKLIST_FILE,
    DEFAULT_FRAMEWORK,
    render_checklist,
)
from vercel_to_netlify.converter.config_mapper import default_netlify_config
from vercel_to_netlify.converter.env_classifier import ClassifiedEnv, classify_env
from vercel_to_netlify.converter.env_documents import (
    CLI_SCRIPT_FILE,
    ENV_OUTPUT_FILE,
    INSTRUCTIONS_FILE,
    render_cli_script,
    render_env_file,
    render_instructions,
)
from vercel_to_netlify.converter.env_parser import merge_env_sources
from vercel_to_netlify.converter.processor import convert_config_text
from vercel_to_netlify.wizard.exceptions import (
    EnvFileError,
    OutputWriteError,
    ProjectPathError,
)
from vercel_to_netlify.wizard.logging_config import get_logger
from vercel_to_netlify.wizard.validators import validate_project_path

logger = get_logger(__name__)

VERCEL_CONFIG_FILE = "vercel.json"
NETLIFY_CONFIG_FILE = "netlify.toml"

# Read in this order; later files override earlier ones
ENV_SOURCE_FILES = [".env", ".env.local", ".env.production", ".env.development"]


@dataclass
class EnvMigrationReport:
    """What an env migration found and wrote."""
    source_files: List[str] = field(default_factory=list)
    total: int = 0
    public_count: int = 0
    private_count: int = 0
    written_files: List[Path] = field(default_factory=list)
    classified: Optional[ClassifiedEnv] = None


def resolve_project_path(path) -> Path:
    """Return the project directory as a Path.

    Raises:
        ProjectPathError: if the path is missing or not a directory
    """
    project = Path(path).expanduser()
    valid, message = validate_project_path(str(project))
    if not valid:
        raise ProjectPathError(message, path=str(project))
    return project


def _write(path: Path, content: str, written: List[Path], mode: Optional[int] = None) -> None:
    try:
        path.write_text(content, encoding="utf-8")
        if mode is not None:
            os.chmod(path, mode)
    except OSError as e:
        raise OutputWriteError(
            f"Could not write {path.name}",
            written_files=[str(p) for p in written],
            details=str(e)
        )
    written.append(path)
    logger.debug("Wrote %s", path)


def convert_project_config(path) -> str:
    """Convert <project>/vercel.json into <project>/netlify.toml.

    Missing or unusable vercel.json produces the starter netlify.toml.

    Returns:
        The netlify.toml text written
    """
    project = resolve_project_path(path)
    vercel_path = project / VERCEL_CONFIG_FILE

    if vercel_path.exists():
        try:
            content = convert_config_text(vercel_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read %s (%s), creating basic %s", VERCEL_CONFIG_FILE, e, NETLIFY_CONFIG_FILE)
            content = default_netlify_config()
    else:
        logger.warning("%s not found, creating basic %s", VERCEL_CONFIG_FILE, NETLIFY_CONFIG_FILE)
        content = default_netlify_config()

    _write(project / NETLIFY_CONFIG_FILE, content, [])
    return content


def read_env_sources(project: Path) -> List[tuple]:
    """Read the .env family in precedence order.

    Returns:
        (file name, text) pairs for the files that exist

    Raises:
        EnvFileError: if an existing file cannot be read
    """
    sources = []
    for name in ENV_SOURCE_FILES:
        env_path = project / name
        if not env_path.is_file():
            continue
        try:
            sources.append((name, env_path.read_text(encoding="utf-8")))
        except (OSError, UnicodeDecodeError) as e:
            raise EnvFileError(f"Error reading {name}", env_file=name, details=str(e))
    return sources


def migrate_project_env(path) -> Optional[EnvMigrationReport]:
    """Write .env.netlify, the instructions and the setup script.

    Returns:
        A report of the migration, or None when the project has no .env files
    """
    project = resolve_project_path(path)
    sources = read_env_sources(project)

    if not sources:
        logger.warning("No .env files found in %s", project)
        return None

    source_names = [name for name, _ in sources]
    variables = merge_env_sources(text for _, text in sources)
    classified = classify_env(variables)

    report = EnvMigrationReport(
        source_files=source_names,
        total=len(variables),
        public_count=len(classified.public),
        private_count=len(classified.private),
        classified=classified,
    )

    _write(project / ENV_OUTPUT_FILE, render_env_file(classified, sources=source_names), report.written_files)
    logger.debug("Created %s with %d variables", ENV_OUTPUT_FILE, report.total)

    _write(project / INSTRUCTIONS_FILE, render_instructions(variables, classified), report.written_files)

    _write(project / CLI_SCRIPT_FILE, render_cli_script(variables), report.written_files, mode=0o755)

    return report


def write_project_checklist(path, framework: str = DEFAULT_FRAMEWORK) -> Path:
    """Write MIGRATION_CHECKLIST.md and return its path."""
    project = resolve_project_path(path)
    checklist_path = project / CHECKLIST_FILE
    _write(checklist_path, render_checklist(framework), [])
    return checklist_path
