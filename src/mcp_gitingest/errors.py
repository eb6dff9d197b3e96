"""Failure taxonomy and agent-facing error messages for gitingest runs."""

from __future__ import annotations

import enum
from typing import Optional, Sequence


class AnalyzerError(Exception):
    """The analyzer process exited with a non-zero status."""

    def __init__(
        self,
        message: str,
        returncode: Optional[int] = None,
        stderr: str = "",
        command: Optional[Sequence[str]] = None,
        detail: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.returncode = returncode
        self.stderr = stderr
        # analyzer-written text only; no program path
        self.detail = message if detail is None else detail
        self.command = list(command or [])


class FailureCategory(str, enum.Enum):
    MISSING_EXECUTABLE = "missing_executable"
    AUTHENTICATION_FAILURE = "authentication_failure"
    REPOSITORY_NOT_FOUND = "repository_not_found"
    GENERIC_COMMAND_FAILURE = "generic_command_failure"
    UNEXPECTED_FAILURE = "unexpected_failure"


INSTALL_MESSAGE = (
    "ERROR: GitIngest is not installed. Please install it with:\n"
    "  pipx install gitingest\n"
    "\n"
    "Or:\n"
    "  pip install gitingest\n"
    "\n"
    "Then verify: gitingest --version"
)

AUTH_MESSAGE = (
    "ERROR: Authentication failed. For private repositories, provide a GitHub token:\n"
    "  - Pass github_token argument\n"
    "  - Or set GITHUB_TOKEN environment variable"
)

NOT_FOUND_TEMPLATE = (
    "ERROR: Repository not found: {url}\n"
    "\n"
    "Please verify:\n"
    "  - The URL is correct\n"
    "  - The repository exists\n"
    "  - You have access to the repository"
)

GENERIC_TEMPLATE = (
    "ERROR: Failed to analyze repository\n"
    "\n"
    "Details: {details}\n"
    "\n"
    "Command attempted: {command}"
)

UNEXPECTED_TEMPLATE = "ERROR: An unexpected error occurred: {failure}"


def classify_failure(failure: object) -> FailureCategory:
    """Map a failure to its category.

    Matching is on the lower-cased message, first hit wins. For an
    AnalyzerError only the analyzer's own output is matched. Anything that
    is not an exception is UNEXPECTED_FAILURE.
    """
    if not isinstance(failure, Exception):
        return FailureCategory.UNEXPECTED_FAILURE

    # spawn of a missing executable never reaches a shell
    if isinstance(failure, FileNotFoundError):
        return FailureCategory.MISSING_EXECUTABLE

    text = failure.detail if isinstance(failure, AnalyzerError) else str(failure)
    message = text.lower()
    if "command not found" in message or "gitingest: not found" in message:
        return FailureCategory.MISSING_EXECUTABLE
    if "authentication" in message or "401" in message:
        return FailureCategory.AUTHENTICATION_FAILURE
    if "not found" in message or "404" in message:
        return FailureCategory.REPOSITORY_NOT_FOUND
    return FailureCategory.GENERIC_COMMAND_FAILURE


def describe_failure(failure: object, repository_url: str, command: str) -> str:
    """Render the agent-facing message for ``failure``.

    Args:
        failure: Whatever the run raised
        repository_url: URL the caller asked for
        command: Printable form of the attempted command

    Returns:
        One of the fixed ``ERROR: ...`` messages
    """
    category = classify_failure(failure)
    if category is FailureCategory.MISSING_EXECUTABLE:
        return INSTALL_MESSAGE
    if category is FailureCategory.AUTHENTICATION_FAILURE:
        return AUTH_MESSAGE
    if category is FailureCategory.REPOSITORY_NOT_FOUND:
        return NOT_FOUND_TEMPLATE.format(url=repository_url)
    if category is FailureCategory.GENERIC_COMMAND_FAILURE:
        return GENERIC_TEMPLATE.format(details=str(failure), command=command)
    return UNEXPECTED_TEMPLATE.format(failure=str(failure))
