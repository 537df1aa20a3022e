"""
Questions Step

Ask what the migration should cover, unless answers were supplied up front.
"""

from typing import TYPE_CHECKING

from vercel_to_netlify.converter.project import VERCEL_CONFIG_FILE
from vercel_to_netlify.wizard.orchestrator import MigrationAnswers
from vercel_to_netlify.wizard.validators import validate_framework

if TYPE_CHECKING:
    from vercel_to_netlify.wizard.orchestrator import MigrationOrchestrator


def _describe(answers: MigrationAnswers) -> str:
    parts = []
    parts.append("convert vercel.json" if answers.has_vercel_json else "skip netlify.toml")
    parts.append("migrate .env files" if answers.migrate_env else "leave .env files alone")
    if answers.generate_checklist:
        parts.append(f"generate a {answers.framework} checklist")
    return ", ".join(parts)


def questions_step(wizard: "MigrationOrchestrator") -> bool:
    """Collect the migration answers.

    Returns:
        True to continue
    """
    if wizard.state.answers is not None:
        wizard.ui.print_info(f"Using provided answers: {_describe(wizard.state.answers)}")
        return True

    has_vercel_json = wizard.ui.prompt_confirm(
        "Do you have a vercel.json configuration file?",
        default=(wizard.project_path / VERCEL_CONFIG_FILE).exists()
    )
    migrate_env = wizard.ui.prompt_confirm(
        "Do you want to migrate environment variables?",
        default=True
    )
    framework = wizard.ui.prompt_text(
        "What framework are you using? (e.g., Next.js, React, Vue)",
        default="Next.js",
        required=True,
        validator=validate_framework
    )
    generate_checklist = wizard.ui.prompt_confirm(
        "Generate migration checklist?",
        default=True
    )

    wizard.state.answers = MigrationAnswers(
        has_vercel_json=has_vercel_json,
        migrate_env=migrate_env,
        framework=framework,
        generate_checklist=generate_checklist,
    )
    return True
