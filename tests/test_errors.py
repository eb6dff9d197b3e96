import pytest

from mcp_gitingest.errors import (
    AUTH_MESSAGE,
    INSTALL_MESSAGE,
    AnalyzerError,
    FailureCategory,
    classify_failure,
    describe_failure,
)

URL = "https://github.com/user/missing"
CMD = f"gitingest {URL} -o -"


@pytest.mark.parametrize(
    "message",
    ["sh: gitingest: command not found", "/bin/sh: 1: gitingest: not found", "COMMAND NOT FOUND"],
)
def test_missing_executable_by_message(message):
    assert describe_failure(RuntimeError(message), URL, CMD) == INSTALL_MESSAGE


def test_missing_executable_by_spawn_error():
    err = FileNotFoundError(2, "No such file or directory", "gitingest")
    assert classify_failure(err) is FailureCategory.MISSING_EXECUTABLE
    assert describe_failure(err, URL, CMD) == INSTALL_MESSAGE


def test_install_message_text():
    assert INSTALL_MESSAGE == (
        "ERROR: GitIngest is not installed. Please install it with:\n"
        "  pipx install gitingest\n\n"
        "Or:\n"
        "  pip install gitingest\n\n"
        "Then verify: gitingest --version"
    )


@pytest.mark.parametrize("message", ["Authentication required", "HTTP Error 401: Unauthorized"])
def test_authentication_failure(message):
    assert describe_failure(AnalyzerError(message), URL, CMD) == AUTH_MESSAGE


def test_404_maps_to_repository_not_found():
    result = describe_failure(AnalyzerError("HTTP Error 404"), URL, CMD)
    assert result == (
        f"ERROR: Repository not found: {URL}\n\n"
        "Please verify:\n"
        "  - The URL is correct\n"
        "  - The repository exists\n"
        "  - You have access to the repository"
    )


def test_authentication_checked_before_not_found():
    # "401" wins even though "not found" is also present
    assert classify_failure(AnalyzerError("401 / repo not found")) is FailureCategory.AUTHENTICATION_FAILURE


def test_generic_failure_includes_details_and_command():
    result = describe_failure(AnalyzerError("disk full"), URL, CMD)
    assert result == (
        "ERROR: Failed to analyze repository\n\n"
        "Details: disk full\n\n"
        f"Command attempted: {CMD}"
    )


def test_non_exception_failure_is_unexpected():
    assert classify_failure("boom") is FailureCategory.UNEXPECTED_FAILURE
    assert describe_failure("boom", URL, CMD) == "ERROR: An unexpected error occurred: boom"


def test_analyzer_error_carries_process_details():
    err = AnalyzerError("gitingest exited with code 2: bad", returncode=2, stderr="bad", command=["gitingest"])
    assert err.returncode == 2
    assert err.stderr == "bad"
    assert err.command == ["gitingest"]
    assert str(err) == "gitingest exited with code 2: bad"


def test_analyzer_error_classified_on_analyzer_output_only():
    err = AnalyzerError(
        "/opt/tools-404/gitingest exited with code 1: disk full",
        returncode=1,
        stderr="disk full\n",
        detail="disk full",
    )
    assert classify_failure(err) is FailureCategory.GENERIC_COMMAND_FAILURE
    result = describe_failure(err, URL, CMD)
    assert result.startswith("ERROR: Failed to analyze repository\n")
    assert "Details: /opt/tools-404/gitingest exited with code 1: disk full" in result
