"""
Migration Wizard UI Components

Console output and prompts for the migration wizard using the rich library.
"""

import re
from typing import Optional, List, Callable, Sequence, Tuple
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt, Confirm
from rich.table import Table


MASK = "********"

# Variable name fragments that indicate a secret value
SECRET_PATTERNS = [
    "token", "password", "passwd", "secret", "key", "credential",
    "auth", "bearer", "jwt", "dsn", "private",
]

# Token formats that are secret whatever they are called
SECRET_REGEXES = [
    r'sk_live_[a-zA-Z0-9]{16,}',  # Stripe live secret keys
    r'sk-[a-zA-Z0-9\-]{20,}',  # OpenAI / Anthropic style keys
    r'xox[bp]-[a-zA-Z0-9\-]+',  # Slack tokens
    r'gh[po]_[a-zA-Z0-9]{36,}',  # GitHub tokens
    r'AKIA[A-Z0-9]{16}',  # AWS Access Key ID
    r'nfp_[a-zA-Z0-9]{20,}',  # Netlify personal access tokens
]

_ASSIGNMENT_RE = re.compile(
    r'(\w*(?:%s)\w*["\']?\s*[=:]\s*["\']?)([^"\'\s]+)' % "|".join(SECRET_PATTERNS),
    re.IGNORECASE,
)
_TOKEN_RE = re.compile("|".join(SECRET_REGEXES))

# (markup, icon) per message kind
_STATUS = {
    "success": ("green", "✓"),
    "error": ("red", "✗"),
    "warning": ("yellow", "⚠"),
    "info": ("blue", "ℹ"),
}


def mask_secrets(text: str, mask: str = MASK) -> str:
    """Replace secret values in free text.

    Values assigned to secret-looking names (``DB_PASSWORD=...``,
    ``apiKey: ...``) and known token formats are replaced by ``mask``.
    """
    if not text:
        return text
    text = _ASSIGNMENT_RE.sub(lambda m: m.group(1) + mask, text)
    return _TOKEN_RE.sub(mask, text)


def is_secret_key(key: str) -> bool:
    """Check if a variable name indicates it holds a secret value."""
    lowered = key.lower()
    return any(fragment in lowered for fragment in SECRET_PATTERNS)


class MigrationUI:
    """UI components for the migration wizard."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()
        self._total_steps = 0

    def print_header(self, title: str = "Vercel to Netlify Migration"):
        self.console.print()
        self.console.print(Panel(f"[bold blue]{title}[/bold blue]", border_style="blue", padding=(0, 2)))
        self.console.print()

    def print_step_header(self, step_num: int, title: str, description: str = ""):
        self.console.print()
        self.console.print(f"[bold cyan]Step {step_num}/{self._total_steps}:[/bold cyan] [bold]{title}[/bold]")
        if description:
            self.console.print(f"[dim]{description}[/dim]")

    def _status(self, kind: str, message: str):
        style, icon = _STATUS[kind]
        self.console.print(f"[{style}]{icon}[/{style}] {message}")

    def print_success(self, message: str):
        self._status("success", message)

    def print_error(self, message: str):
        self._status("error", message)

    def print_warning(self, message: str):
        self._status("warning", message)

    def print_info(self, message: str):
        self._status("info", message)

    def print_skip(self, message: str):
        self.console.print(f"[dim]○ {message} (skipped)[/dim]")

    def prompt_text(
        self,
        prompt: str,
        default: str = "",
        required: bool = False,
        validator: Optional[Callable[[str], Tuple[bool, str]]] = None
    ) -> str:
        """Ask until the answer is non-empty (when required) and passes ``validator``.

        The validator returns (is_valid, message); the message is shown when
        the value is rejected.
        """
        while True:
            answer = Prompt.ask(prompt, default=default or None, console=self.console)
            answer = (answer or "").strip()

            if not answer:
                if required:
                    self.print_error("An answer is required")
                    continue
                return answer

            if validator:
                ok, reason = validator(answer)
                if not ok:
                    self.print_error(reason)
                    continue

            return answer

    def prompt_confirm(self, prompt: str, default: bool = False) -> bool:
        return Confirm.ask(prompt, default=default, console=self.console)

    def show_variables_table(self, title: str, variables: Sequence[Tuple[str, str, str]]):
        """Show migrated variables with secret values masked.

        Args:
            title: Table title
            variables: (name, value, scope) tuples
        """
        table = Table(title=title, border_style="blue")
        table.add_column("Variable", style="cyan")
        table.add_column("Value")
        table.add_column("Scope", style="magenta")

        for name, value, scope in variables:
            if not value:
                shown = "[dim]empty[/dim]"
            elif is_secret_key(name):
                shown = MASK
            else:
                shown = mask_secrets(value)
            table.add_row(name, shown, scope)

        self.console.print(table)

    def show_written_files(self, files: Sequence[str]):
        for file_name in files:
            self.console.print(f"  [dim]→[/dim] {file_name}")

    def show_completion_panel(self, title: str, content: str, next_steps: List[str]):
        """Show the final summary panel followed by numbered next steps."""
        self.console.print()
        self.console.print(Panel(f"[bold green]{title}[/bold green]\n\n{content}", border_style="green", padding=(1, 2)))

        if not next_steps:
            return
        self.console.print()
        self.console.print("[bold]Next Steps:[/bold]")
        for number, step in enumerate(next_steps, 1):
            self.console.print(f"  {number}. {step}")
        self.console.print()
