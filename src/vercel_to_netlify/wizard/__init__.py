"""
Migration Wizard

Interactive wizard for migrating a Vercel project to Netlify.
"""

from vercel_to_netlify.wizard.orchestrator import MigrationOrchestrator
from vercel_to_netlify.wizard.ui import MigrationUI

__all__ = ["MigrationOrchestrator", "MigrationUI"]
