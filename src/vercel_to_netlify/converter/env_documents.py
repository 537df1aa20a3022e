"""
Environment Documents

Renders .env.netlify, the migration instructions and the Netlify CLI setup
script from classified variables.
"""

from typing import Dict, Optional, Sequence

from vercel_to_netlify.converter.env_classifier import ClassifiedEnv, PUBLIC_PREFIXES
from vercel_to_netlify.wizard.logging_config import get_logger
from vercel_to_netlify.wizard.validators import validate_env_key

logger = get_logger(__name__)


ENV_OUTPUT_FILE = ".env.netlify"
INSTRUCTIONS_FILE = "ENV_MIGRATION_INSTRUCTIONS.md"
CLI_SCRIPT_FILE = "netlify-env-commands.sh"


def render_env_file(classified: ClassifiedEnv, sources: Optional[Sequence[str]] = None) -> str:
    """Render .env.netlify; server-side variables come before client-side ones.

    Args:
        classified: Variables split into public and private groups
        sources: Names of the .env files the variables were read from
    """
    public_hint = " or ".join(p.prefix for p in PUBLIC_PREFIXES)
    lines = ["# Environment Variables for Netlify"]
    if sources:
        lines.append(f"# Migrated from: {', '.join(sources)}")
    lines.extend([
        "#",
        "# IMPORTANT: Set these in Netlify UI or via Netlify CLI:",
        "# 1. Go to Site settings > Environment variables in Netlify dashboard",
        "# 2. Or use: netlify env:set KEY value",
        "#",
        "# For sensitive values, use Netlify's Secrets Controller",
        "# Never commit sensitive data to git",
        "#",
        f"# Variables with {public_hint} prefixes are available in the browser",
        "# Other variables are only available server-side",
        "",
    ])

    if classified.private:
        lines.append("# Server-side variables (not exposed to browser)")
        lines.extend(f"{key}={value}" for key, value in classified.private)
        lines.append("")

    if classified.public:
        lines.append("# Client-side variables (exposed to browser)")
        lines.extend(f"{key}={value}" for key, value in classified.public)
        lines.append("")

    return "\n".join(lines)


def render_instructions(variables: Dict[str, str], classified: ClassifiedEnv) -> str:
    """Render the markdown guide for moving variables into Netlify."""
    prefix_lines = "\n".join(
        f"- {p.label}: `{p.prefix}` for client-side vars" for p in PUBLIC_PREFIXES
    )
    return f"""# Environment Variables Migration Instructions

## Summary
- **Total variables found:** {len(variables)}
- **Public variables:** {len(classified.public)} (browser-accessible)
- **Private variables:** {len(classified.private)} (server-only)

## Migration Steps

### Option 1: Using Netlify UI (Recommended for sensitive data)

1. Go to your site in Netlify Dashboard
2. Navigate to **Site settings** > **Environment variables**
3. Click **Add a variable** for each environment variable
4. Set the appropriate scope:
   - **Builds:** Available during build time
   - **Functions:** Available to serverless functions
   - **Post processing:** Available to plugins

### Option 2: Using Netlify CLI

Run the generated script:
```bash
./{CLI_SCRIPT_FILE}
```

Or set variables individually:
```bash
netlify env:set VARIABLE_NAME "value"
```

### Option 3: Using netlify.toml (Not recommended for secrets)

Add to `netlify.toml`:
```toml
[build.environment]
  PUBLIC_VAR = "value"
  # Do NOT put sensitive values here
```

## Important Notes

**Security:**
- Never commit `{ENV_OUTPUT_FILE}` to git if it contains sensitive data
- Add `{ENV_OUTPUT_FILE}` to `.gitignore`
- Use Netlify Secrets Controller for sensitive values

**Framework-specific prefixes:**
{prefix_lines}

**Context-specific variables:**
You can set different values for different deploy contexts:
- Production
- Deploy Previews
- Branch deploys

## Testing

After setting variables:
1. Trigger a new deploy
2. Check build logs for any missing variables
3. Test functionality that depends on these variables
"""


def shell_escape(value: str) -> str:
    """Escape a value for use inside a double-quoted bash string."""
    for char in ("\\", '"', "$", "`"):
        value = value.replace(char, "\\" + char)
    return value


def render_cli_script(variables: Dict[str, str]) -> str:
    """Render a bash script that sets every variable with the Netlify CLI.

    Names that are not valid shell identifiers are left out, since the name
    is written into the script unquoted.
    """
    lines = [
        "#!/bin/bash",
        "# Netlify Environment Variables Setup Script",
        "# Generated by vercel-to-netlify",
        "#",
        f"# Usage: ./{CLI_SCRIPT_FILE}",
        "#",
        "# Make sure you have Netlify CLI installed and authenticated:",
        "# npm install -g netlify-cli",
        "# netlify login",
        "",
        'echo "Setting environment variables in Netlify..."',
        'echo ""',
        "",
    ]
    for key, value in variables.items():
        valid, message = validate_env_key(key)
        if not valid:
            logger.warning("Leaving %r out of %s: %s", key, CLI_SCRIPT_FILE, message)
            continue
        lines.append(f'netlify env:set {key} "{shell_escape(value)}"')
    lines.extend([
        "",
        'echo ""',
        'echo "✓ All environment variables have been set"',
        "echo \"Run 'netlify env:list' to verify\"",
        "",
    ])
    return "\n".join(lines)
