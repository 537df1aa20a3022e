"""
Migration Wizard Steps

Individual step handlers for the migration wizard.
"""

from vercel_to_netlify.wizard.steps.questions import questions_step
from vercel_to_netlify.wizard.steps.netlify_config import netlify_config_step
from vercel_to_netlify.wizard.steps.env_vars import env_vars_step
from vercel_to_netlify.wizard.steps.checklist import checklist_step
from vercel_to_netlify.wizard.steps.summary import summary_step

# Step definitions for the wizard orchestrator
MIGRATION_STEPS = [
    {
        "name": "questions",
        "title": "Migration Options",
        "description": "Choose what to migrate",
        "handler": questions_step,
        "skippable": False,
    },
    {
        "name": "netlify_config",
        "title": "Configuration",
        "description": "Convert vercel.json to netlify.toml",
        "handler": netlify_config_step,
        "skippable": False,
    },
    {
        "name": "env_vars",
        "title": "Environment Variables",
        "description": "Convert .env files for Netlify",
        "handler": env_vars_step,
        "skippable": True,
    },
    {
        "name": "checklist",
        "title": "Checklist",
        "description": "Generate the migration checklist",
        "handler": checklist_step,
        "skippable": True,
    },
    {
        "name": "summary",
        "title": "Summary",
        "description": "Review generated files and next steps",
        "handler": summary_step,
        "skippable": False,
    },
]

__all__ = [
    "questions_step",
    "netlify_config_step",
    "env_vars_step",
    "checklist_step",
    "summary_step",
    "MIGRATION_STEPS",
]
