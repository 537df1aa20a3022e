"""
Environment Variables Step

Merge the project's .env files and write the Netlify variable documents.
"""

from typing import TYPE_CHECKING

from vercel_to_netlify.converter.project import ENV_SOURCE_FILES, migrate_project_env
from vercel_to_netlify.wizard.validators import validate_env_key

if TYPE_CHECKING:
    from vercel_to_netlify.wizard.orchestrator import MigrationOrchestrator


def env_vars_step(wizard: "MigrationOrchestrator") -> bool:
    """Migrate environment variables.

    Returns:
        True on success or when the user opted out
    """
    if not wizard.answers.migrate_env:
        wizard.ui.print_skip("Environment variable migration")
        return True

    report = migrate_project_env(wizard.project_path)
    if report is None:
        wizard.ui.print_warning(f"No .env files found (looked for {', '.join(ENV_SOURCE_FILES)})")
        return True

    for path in report.written_files:
        wizard.track_file(path)
    wizard.set_data("env_report", report)

    wizard.ui.print_success(
        f"Migrated {report.total} variables from {', '.join(report.source_files)} "
        f"({report.private_count} server-side, {report.public_count} client-side)"
    )
    wizard.ui.show_written_files([path.name for path in report.written_files])

    if report.classified is not None and len(report.classified):
        rows = [(key, value, "server") for key, value in report.classified.private]
        rows += [(key, value, "browser") for key, value in report.classified.public]
        wizard.ui.show_variables_table("Migrated Variables", rows)

        for key, _, _ in rows:
            valid, message = validate_env_key(key)
            if not valid:
                wizard.ui.print_warning(f"{key}: {message}")

    return True
