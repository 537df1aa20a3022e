"""
Help topics for the vercel-to-netlify CLI.

Provides detailed help accessible via 'vercel-to-netlify help <topic>'.
"""

from typing import List, Tuple, Optional

from vercel_to_netlify.converter.env_classifier import PUBLIC_PREFIXES
from vercel_to_netlify.wizard.logging_config import ENV_VARS


def _prefix_table() -> str:
    return "\n".join(f"  {p.prefix:<14} {p.label}" for p in PUBLIC_PREFIXES)


def _env_var_table() -> str:
    return "\n".join(
        f"  {name:<14} {info['description']} (default: {info['default']})"
        for name, info in ENV_VARS.items()
    )


HELP_TOPICS = {
    "config": {
        "description": "How vercel.json maps to netlify.toml",
        "content": """
[bold]Configuration Conversion[/bold]

[bold cyan]Mapped Fields:[/bold cyan]
  buildCommand      -> \\[build] command
  outputDirectory   -> \\[build] publish  (nextjs framework: .next)
  redirects         -> [\\[redirects]] status 301 (permanent) / 302
  rewrites          -> [\\[redirects]] status 200
  headers           -> [\\[headers]] + \\[headers.values]
  env               -> advisory note (see .env.netlify)
  functions         -> \\[functions] directory = "netlify/functions"

[bold cyan]Notes:[/bold cyan]
  Conditional redirects ("has") get a comment asking for manual review.
  A missing or invalid vercel.json produces a starter netlify.toml.

[bold cyan]Command:[/bold cyan]
  vercel-to-netlify convert-config --path ./my-app
"""
    },

    "env": {
        "description": "Environment variable migration",
        "content": f"""
[bold]Environment Variables[/bold]

[bold cyan]Files Read (later files win):[/bold cyan]
  .env, .env.local, .env.production, .env.development

[bold cyan]Client-side Prefixes:[/bold cyan]
{_prefix_table()}

[bold cyan]Generated Files:[/bold cyan]
  .env.netlify                   Variables, server-side first
  ENV_MIGRATION_INSTRUCTIONS.md  How to set them in Netlify
  netlify-env-commands.sh        'netlify env:set' for every variable

[bold cyan]Command:[/bold cyan]
  vercel-to-netlify env-migrate --path ./my-app

[yellow]Never commit .env.netlify if it contains secrets.[/yellow]
"""
    },

    "checklist": {
        "description": "The migration checklist",
        "content": """
[bold]Migration Checklist[/bold]

Writes MIGRATION_CHECKLIST.md covering preparation, configuration,
Netlify setup, testing, go-live and cleanup. Next.js projects get
framework-specific items.

[bold cyan]Command:[/bold cyan]
  vercel-to-netlify checklist --framework Next.js
"""
    },

    "server": {
        "description": "Running the migration API",
        "content": f"""
[bold]Migration API[/bold]

[bold cyan]Start:[/bold cyan]
  vercel-to-netlify serve --port 3001

[bold cyan]Endpoint:[/bold cyan]
  POST /api/migrate
  {{"vercelJson": "...", "envVars": "...", "framework": "Next.js", "generateChecklist": true}}

[bold cyan]Environment:[/bold cyan]
{_env_var_table()}
"""
    },
}


def list_topics() -> List[Tuple[str, str]]:
    """List all help topics with descriptions.

    Returns:
        List of (topic_name, description) tuples
    """
    return [(name, data["description"]) for name, data in HELP_TOPICS.items()]


def get_help_content(topic: str) -> Optional[str]:
    """Get help content for a topic.

    Args:
        topic: Topic name (case-insensitive)

    Returns:
        Help content string or None if topic not found
    """
    topic_data = HELP_TOPICS.get(topic.lower())
    return topic_data["content"] if topic_data else None


def get_topic_names() -> List[str]:
    return list(HELP_TOPICS.keys())
