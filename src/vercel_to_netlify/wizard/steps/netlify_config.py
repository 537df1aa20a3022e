"""
Netlify Config Step

Convert vercel.json into netlify.toml.
"""

from typing import TYPE_CHECKING

from vercel_to_netlify.converter.project import (
    NETLIFY_CONFIG_FILE,
    VERCEL_CONFIG_FILE,
    convert_project_config,
)

if TYPE_CHECKING:
    from vercel_to_netlify.wizard.orchestrator import MigrationOrchestrator


def netlify_config_step(wizard: "MigrationOrchestrator") -> bool:
    """Write netlify.toml when the user has a vercel.json.

    Returns:
        True on success or when there is nothing to convert
    """
    if not wizard.answers.has_vercel_json:
        wizard.ui.print_skip("Configuration conversion")
        return True

    if not (wizard.project_path / VERCEL_CONFIG_FILE).exists():
        wizard.ui.print_warning(f"{VERCEL_CONFIG_FILE} not found, creating basic {NETLIFY_CONFIG_FILE}")

    convert_project_config(wizard.project_path)
    wizard.track_file(wizard.project_path / NETLIFY_CONFIG_FILE)
    wizard.set_data("netlify_toml_written", True)
    wizard.ui.print_success(f"Created {NETLIFY_CONFIG_FILE}")
    return True
