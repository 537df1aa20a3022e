"""
Summary Step

Show what was generated and the next steps.
"""

from typing import TYPE_CHECKING, List

from vercel_to_netlify.converter.checklist import CHECKLIST_FILE
from vercel_to_netlify.converter.env_documents import CLI_SCRIPT_FILE
from vercel_to_netlify.converter.project import NETLIFY_CONFIG_FILE

if TYPE_CHECKING:
    from vercel_to_netlify.wizard.orchestrator import MigrationOrchestrator


def build_next_steps(wizard: "MigrationOrchestrator") -> List[str]:
    """Next steps for the files this run produced."""
    steps = []
    if wizard.get_data("netlify_toml_written"):
        steps.append(f"Review the generated {NETLIFY_CONFIG_FILE} file")
    if wizard.get_data("env_report") is not None:
        steps.append(f"Set your variables in Netlify (run ./{CLI_SCRIPT_FILE} or use the dashboard)")
    if wizard.answers.generate_checklist:
        steps.append(f"Check {CHECKLIST_FILE} for manual steps")
    steps.append("Deploy to Netlify: netlify deploy")
    return steps


def summary_step(wizard: "MigrationOrchestrator") -> bool:
    files = [str(path) for path in wizard.state.created_files]
    content = "\n".join(f"• {name}" for name in files) if files else "No files were generated."

    wizard.ui.show_completion_panel(
        "Migration preparation complete!",
        content,
        build_next_steps(wizard)
    )
    return True
