"""
Migrator Exceptions

Custom exception types with remediation hints for the CLI and wizard.
"""

from typing import Optional, List


class MigratorError(Exception):
    """Base exception for all migrator errors."""

    def __init__(
        self,
        message: str,
        remediation: Optional[str] = None,
        details: Optional[str] = None
    ):
        """Initialize the error.

        Args:
            message: Human-readable error message
            remediation: Suggested fix for the user
            details: Technical details for debugging
        """
        super().__init__(message)
        self.message = message
        self.remediation = remediation
        self.details = details

    def __str__(self) -> str:
        parts = [self.message]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.remediation:
            parts.append(f"To fix: {self.remediation}")
        return "\n".join(parts)


class ConfigParseError(MigratorError):
    """vercel.json could not be turned into a source configuration."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        remediation: Optional[str] = None,
        details: Optional[str] = None
    ):
        self.field = field
        if not remediation and field:
            remediation = f"Check the '{field}' entry in vercel.json"
        super().__init__(message, remediation, details)


class ProjectPathError(MigratorError):
    """The project directory is missing or not a directory."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        remediation: Optional[str] = None,
        details: Optional[str] = None
    ):
        self.path = path
        if not remediation:
            remediation = "Pass an existing project directory with --path"
        super().__init__(message, remediation, details)


class EnvFileError(MigratorError):
    """An .env file exists but could not be read."""

    def __init__(
        self,
        message: str,
        env_file: Optional[str] = None,
        remediation: Optional[str] = None,
        details: Optional[str] = None
    ):
        self.env_file = env_file
        if not remediation and env_file:
            remediation = f"Check that {env_file} is readable UTF-8 text"
        super().__init__(message, remediation, details)


class AnswersFileError(MigratorError):
    """The answers file for a silent migration is invalid."""

    def __init__(
        self,
        message: str,
        key: Optional[str] = None,
        expected_format: Optional[str] = None,
        remediation: Optional[str] = None,
        details: Optional[str] = None
    ):
        self.key = key
        self.expected_format = expected_format
        if not remediation and key and expected_format:
            remediation = f"The '{key}' answer should be {expected_format}"
        super().__init__(message, remediation, details)


class OutputWriteError(MigratorError):
    """Generated files could not be written."""

    def __init__(
        self,
        message: str,
        written_files: Optional[List[str]] = None,
        remediation: Optional[str] = None,
        details: Optional[str] = None
    ):
        self.written_files = written_files or []
        if not remediation:
            remediation = "Check that the project directory is writable"
            if written_files:
                files_str = ", ".join(written_files[:3])
                if len(written_files) > 3:
                    files_str += f" and {len(written_files) - 3} more"
                remediation += f". Already written: {files_str}"
        super().__init__(message, remediation, details)


# Error code mapping for CLI exit codes
ERROR_CODES = {
    ConfigParseError: 10,
    ProjectPathError: 11,
    EnvFileError: 12,
    AnswersFileError: 13,
    OutputWriteError: 14,
    MigratorError: 1,
}


def get_error_code(error: Exception) -> int:
    """Get the exit code for an error type."""
    for error_type, code in ERROR_CODES.items():
        if isinstance(error, error_type):
            return code
    return 1
