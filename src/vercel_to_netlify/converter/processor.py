"""
Migration Processor

Single entry point that turns raw vercel.json and .env text into every
Netlify document. Shared by the HTTP API and the project migration helpers.
"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Optional

from vercel_to_netlify.converter.checklist import DEFAULT_FRAMEWORK, render_checklist
from vercel_to_netlify.converter.config_mapper import (
    SourceConfig,
    default_netlify_config,
    map_config,
)
from vercel_to_netlify.converter.env_classifier import classify_env
from vercel_to_netlify.converter.env_documents import (
    render_cli_script,
    render_env_file,
    render_instructions,
)
from vercel_to_netlify.converter.env_parser import parse_env
from vercel_to_netlify.wizard.exceptions import ConfigParseError
from vercel_to_netlify.wizard.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class MigrationResult:
    netlify_toml: str
    env_file: Optional[str] = None
    env_instructions: Optional[str] = None
    cli_commands: Optional[str] = None
    checklist: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """JSON shape returned by the HTTP API; absent documents are left out."""
        fields = {
            "netlifyToml": self.netlify_toml,
            "envFile": self.env_file,
            "envInstructions": self.env_instructions,
            "cliCommands": self.cli_commands,
            "checklist": self.checklist,
        }
        return {key: value for key, value in fields.items() if value is not None}


def convert_config_text(vercel_json: Optional[str]) -> str:
    """Convert vercel.json text, falling back to the starter document.

    Missing input or input that cannot be parsed into a source configuration
    yields the default netlify.toml instead of an error.
    """
    if not vercel_json or not vercel_json.strip():
        return default_netlify_config()

    try:
        source = SourceConfig.from_json(vercel_json)
    except ConfigParseError as e:
        logger.warning("Using default netlify.toml: %s", e.message)
        logger.debug("%s", e)
        return default_netlify_config()

    return map_config(source)


def process_migration(
    vercel_json: Optional[str] = None,
    env_text: Optional[str] = None,
    framework: str = DEFAULT_FRAMEWORK,
    include_checklist: bool = False,
    today: Optional[date] = None,
) -> MigrationResult:
    """Produce every migration document for the given inputs.

    Args:
        vercel_json: Raw vercel.json text
        env_text: Raw .env text
        framework: Framework name for the checklist
        include_checklist: Whether to render the checklist
        today: Date stamped into the checklist
    """
    result = MigrationResult(netlify_toml=convert_config_text(vercel_json))

    if env_text:
        variables = parse_env(env_text)
        classified = classify_env(variables)
        logger.debug(
            "Parsed %d variables (%d public, %d private)",
            len(variables), len(classified.public), len(classified.private)
        )
        result.env_file = render_env_file(classified)
        result.env_instructions = render_instructions(variables, classified)
        result.cli_commands = render_cli_script(variables)

    if include_checklist:
        result.checklist = render_checklist(framework or DEFAULT_FRAMEWORK, today=today)

    return result
