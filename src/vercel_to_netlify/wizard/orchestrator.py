"""
Migration Wizard Orchestrator

Runs the migration steps in order, handles step failures and removes
generated files when the user aborts.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Dict, Any, List, Callable

import yaml
from rich.console import Console

from vercel_to_netlify.converter.checklist import DEFAULT_FRAMEWORK
from vercel_to_netlify.wizard.ui import MigrationUI
from vercel_to_netlify.wizard.exceptions import AnswersFileError, MigratorError
from vercel_to_netlify.wizard.logging_config import get_logger
from vercel_to_netlify.wizard.validators import validate_framework

logger = get_logger(__name__)


@dataclass
class MigrationAnswers:
    """Answers to the wizard questions."""
    has_vercel_json: bool = True
    migrate_env: bool = True
    framework: str = DEFAULT_FRAMEWORK
    generate_checklist: bool = True

    @classmethod
    def from_dict(cls, data: Any) -> "MigrationAnswers":
        """Build answers from a decoded answers file.

        Raises:
            AnswersFileError: on unknown keys or values of the wrong type
        """
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise AnswersFileError(
                "Answers file must contain a mapping",
                remediation="Use 'key: value' lines, e.g. 'framework: Next.js'"
            )

        known = set(cls.__dataclass_fields__)
        unknown = sorted(set(data) - known)
        if unknown:
            raise AnswersFileError(
                f"Unknown answers: {', '.join(map(str, unknown))}",
                remediation=f"Supported answers: {', '.join(sorted(known))}"
            )

        for key in ("has_vercel_json", "migrate_env", "generate_checklist"):
            if key in data and not isinstance(data[key], bool):
                raise AnswersFileError(
                    f"Invalid value for '{key}'",
                    key=key,
                    expected_format="true or false"
                )

        if "framework" in data:
            framework = data["framework"]
            valid, message = validate_framework(framework if isinstance(framework, str) else "")
            if not valid:
                raise AnswersFileError(message, key="framework", expected_format="a framework name such as Next.js")

        return cls(**data)


def load_answers(path: Path) -> MigrationAnswers:
    """Load a YAML answers file for a silent migration.

    Raises:
        AnswersFileError: if the file cannot be read or is invalid
    """
    try:
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    except OSError as e:
        raise AnswersFileError(f"Could not read answers file {path}", details=str(e))
    except yaml.YAMLError as e:
        raise AnswersFileError(f"Answers file {path} is not valid YAML", details=str(e))
    return MigrationAnswers.from_dict(data)


@dataclass
class MigrationState:
    """In-memory state for one wizard run."""
    answers: Optional[MigrationAnswers] = None
    completed_steps: List[int] = field(default_factory=list)
    data: Dict[str, Any] = field(default_factory=dict)
    created_files: List[str] = field(default_factory=list)
    step_retries: Dict[str, int] = field(default_factory=dict)


@dataclass
class StepDefinition:
    """Definition of a wizard step."""
    name: str
    title: str
    description: str
    handler: Callable[["MigrationOrchestrator"], bool]
    skippable: bool = False


class MigrationOrchestrator:
    """Orchestrates the interactive Vercel to Netlify migration."""

    def __init__(
        self,
        project_path: Path,
        console: Optional[Console] = None,
        answers: Optional[MigrationAnswers] = None,
        interactive: bool = True
    ):
        self.console = console or Console()
        self.ui = MigrationUI(self.console)
        self.project_path = Path(project_path)
        self.state = MigrationState(answers=answers)
        self.steps: List[StepDefinition] = []
        self.interactive = interactive

    def add_step(
        self,
        name: str,
        title: str,
        description: str,
        handler: Callable[["MigrationOrchestrator"], bool],
        skippable: bool = False
    ):
        """Add a step to the wizard."""
        self.steps.append(StepDefinition(
            name=name,
            title=title,
            description=description,
            handler=handler,
            skippable=skippable
        ))

    @property
    def answers(self) -> MigrationAnswers:
        if self.state.answers is None:
            self.state.answers = MigrationAnswers()
        return self.state.answers

    def get_data(self, key: str, default: Any = None) -> Any:
        return self.state.data.get(key, default)

    def set_data(self, key: str, value: Any):
        self.state.data[key] = value

    def track_file(self, file_path: Path):
        """Track a generated file for cleanup on failure."""
        path_str = str(file_path)
        if path_str not in self.state.created_files:
            self.state.created_files.append(path_str)

    def _attempt(self, step: StepDefinition) -> bool:
        """Run a step handler once, reporting any error it raises."""
        try:
            return bool(step.handler(self))
        except KeyboardInterrupt:
            raise
        except MigratorError as e:
            logger.debug("Step %s failed: %s", step.name, e)
            self.ui.print_error(f"Error: {e.message}")
            if e.remediation:
                self.ui.print_info(f"To fix: {e.remediation}")
        except Exception as e:
            logger.debug("Unexpected error in step %s", step.name, exc_info=True)
            self.ui.print_error(f"Error in step '{step.title}': {e}")
        return False

    def _run_step(self, step: StepDefinition, max_retries: int) -> bool:
        for attempt in range(1, max_retries + 1):
            self.state.step_retries[step.name] = attempt
            if self._attempt(step):
                return True
            if step.skippable:
                self.ui.print_skip(step.title)
                return True
            if attempt == max_retries or not self.interactive:
                break
            if not self.ui.prompt_confirm("Try again?", default=True):
                break

        self.ui.print_error(
            f"Step '{step.title}' failed after {self.state.step_retries[step.name]} attempt(s)."
        )
        return False

    def _abort(self):
        """Offer to remove generated files; non-interactive runs always remove them."""
        if not self.state.created_files:
            return
        if self.interactive and not self.ui.prompt_confirm("Remove the files generated so far?", default=True):
            return
        failed = self.cleanup_on_failure()
        if failed:
            self.ui.print_warning(f"Some files couldn't be cleaned up: {', '.join(failed[:3])}")

    def run(self, max_retries: int = 3) -> bool:
        """Run every step in order.

        Required steps may be retried interactively up to ``max_retries``
        times; skippable steps are skipped after their first failure.

        Returns:
            True if every required step completed
        """
        self.ui.print_header()
        self.ui._total_steps = len(self.steps)

        for index, step in enumerate(self.steps):
            self.ui.print_step_header(index + 1, step.title, step.description)
            if not self._run_step(step, max_retries):
                self._abort()
                return False
            self.state.completed_steps.append(index)

        return True

    def cleanup_on_failure(self) -> List[str]:
        """Remove generated files.

        Returns:
            List of paths that couldn't be cleaned up
        """
        failed_cleanups = []

        for file_path in reversed(self.state.created_files):
            try:
                path = Path(file_path)
                if path.exists():
                    path.unlink()
            except OSError as e:
                failed_cleanups.append(f"{file_path}: {e}")

        self.state.created_files = []
        return failed_cleanups
