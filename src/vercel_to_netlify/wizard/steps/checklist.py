"""
Checklist Step

Write MIGRATION_CHECKLIST.md for the chosen framework.
"""

from typing import TYPE_CHECKING

from vercel_to_netlify.converter.project import write_project_checklist

if TYPE_CHECKING:
    from vercel_to_netlify.wizard.orchestrator import MigrationOrchestrator


def checklist_step(wizard: "MigrationOrchestrator") -> bool:
    if not wizard.answers.generate_checklist:
        wizard.ui.print_skip("Migration checklist")
        return True

    path = write_project_checklist(wizard.project_path, wizard.answers.framework)
    wizard.track_file(path)
    wizard.ui.print_success(f"Checklist generated: {path.name}")
    return True
