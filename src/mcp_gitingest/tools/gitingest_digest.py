# File: src/mcp_gitingest/tools/gitingest_digest.py
from __future__ import annotations

import asyncio
from typing import Annotated, List, Optional

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from ..errors import AnalyzerError, classify_failure, describe_failure
from ..models.params import DigestRequest
from ..settings import Settings
from ..utils.logging import get_logger

log = get_logger("mcp.gitingest.tools.digest")

TOOL_NAME = "gitingest.digest"

TOOL_DESCRIPTION = (
    "Analyze Git repositories and return structured digest of codebase using GitIngest. "
    "Returns repository summary, directory tree, and file contents optimized for AI analysis. "
    "Useful for understanding unfamiliar codebases, analyzing project structure, "
    "and gathering context for code reviews."
)

REDACTED = "***"

# flags whose value is rendered in double quotes
_QUOTED_FLAGS = {"-i", "-e"}


def build_command(request: DigestRequest, executable: str = "gitingest") -> List[str]:
    """
    Translate a request into the analyzer argument vector.
    Order: url, includes, excludes, size, branch, token, then ``-o -``.
    """
    argv = [executable, request.repository_url]
    for pattern in request.include_patterns or []:
        argv += ["-i", pattern]
    for pattern in request.exclude_patterns or []:
        argv += ["-e", pattern]
    if request.max_file_size:
        argv += ["-s", str(request.max_file_size)]
    if request.branch:
        argv += ["-b", request.branch]
    if request.github_token:
        argv += ["-t", request.github_token]
    argv += ["-o", "-"]
    return argv


def render_command(argv: List[str], redact: bool = False) -> str:
    """Printable one-line form of ``argv`` for logs and error messages."""
    parts: List[str] = []
    prev = None
    for arg in argv:
        if prev in _QUOTED_FLAGS:
            parts.append(f'"{arg}"')
        elif prev == "-t" and redact:
            parts.append(REDACTED)
        else:
            parts.append(arg)
        prev = arg
    return " ".join(parts)


async def run_analyzer(argv: List[str]) -> str:
    """
    Run the analyzer once and return its stdout.
    Raises AnalyzerError on non-zero exit; FileNotFoundError if the executable is missing.
    """
    proc = await asyncio.create_subprocess_exec(
        *argv,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )
    try:
        out, err = await proc.communicate()
    except asyncio.CancelledError:
        proc.kill()
        await proc.wait()
        raise

    stdout = out.decode("utf-8", errors="replace")
    stderr = err.decode("utf-8", errors="replace")
    if proc.returncode != 0:
        detail = stderr.strip() or stdout.strip()
        raise AnalyzerError(
            f"{argv[0]} exited with code {proc.returncode}: {detail}",
            returncode=proc.returncode,
            stderr=stderr,
            command=argv,
            detail=detail,
        )
    return stdout


async def digest_repository(request: DigestRequest, settings: Optional[Settings] = None) -> str:
    """
    Produce the digest for ``request``; every failure comes back as an ``ERROR:`` string.
    """
    settings = settings or Settings.from_env()
    argv = build_command(request, executable=settings.gitingest_bin)
    printable = render_command(argv, redact=True)

    log.info("gitingest.run", repository_url=request.repository_url, command=printable)
    try:
        output = await run_analyzer(argv)
    except Exception as e:
        category = classify_failure(e)
        log.warning(
            "gitingest.failed",
            repository_url=request.repository_url,
            category=category.value,
            error=str(e),
        )
        return describe_failure(e, request.repository_url, printable)

    result = output.strip()
    log.info("gitingest.ok", repository_url=request.repository_url, chars=len(result))
    return result


def register_gitingest_digest(mcp: FastMCP) -> None:
    @mcp.tool(name=TOOL_NAME, title="Digest Git Repository", description=TOOL_DESCRIPTION)
    async def gitingest_digest(
        repository_url: Annotated[
            str,
            Field(description="Git repository URL (GitHub, GitLab, etc.). Example: https://github.com/user/repo"),
        ],
        include_patterns: Annotated[
            Optional[List[str]],
            Field(
                description=(
                    "File patterns to include (Unix shell-style wildcards). "
                    "Examples: ['*.py', '*.js', '*.md']. "
                    "Can be used to focus analysis on specific file types."
                )
            ),
        ] = None,
        exclude_patterns: Annotated[
            Optional[List[str]],
            Field(
                description=(
                    "File patterns to exclude (Unix shell-style wildcards). "
                    "Examples: ['node_modules/*', '*.log', 'dist/*']. "
                    "Useful for filtering out dependencies and build artifacts."
                )
            ),
        ] = None,
        max_file_size: Annotated[
            Optional[int],
            Field(
                description=(
                    "Maximum file size in bytes to process. Example: 51200 for 50KB limit. "
                    "Helps manage memory for large repositories."
                )
            ),
        ] = None,
        branch: Annotated[
            Optional[str],
            Field(description="Specific branch to analyze. Defaults to repository's default branch."),
        ] = None,
        github_token: Annotated[
            Optional[str],
            Field(
                description=(
                    "GitHub personal access token for private repositories. "
                    "Can also be set via GITHUB_TOKEN environment variable."
                )
            ),
        ] = None,
    ) -> str:
        request = DigestRequest(
            repository_url=repository_url,
            include_patterns=include_patterns,
            exclude_patterns=exclude_patterns,
            max_file_size=max_file_size,
            branch=branch,
            github_token=github_token,
        )
        return await digest_repository(request)
