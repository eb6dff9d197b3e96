# File: src/mcp_gitingest/models/params.py

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DigestRequest(BaseModel):
    """
    Input parameters for one gitingest run:
      - repository_url: Git repository URL (GitHub, GitLab, ...)
      - include_patterns / exclude_patterns: ordered shell-style globs
      - max_file_size: per-file size limit in bytes
      - branch: branch to analyze (defaults to the remote default branch)
      - github_token: access token for private repositories
    """

    model_config = ConfigDict(frozen=True)

    repository_url: str = Field(min_length=1)
    include_patterns: Optional[List[str]] = None
    exclude_patterns: Optional[List[str]] = None
    max_file_size: Optional[int] = Field(default=None, gt=0)
    branch: Optional[str] = None
    github_token: Optional[str] = None

    @field_validator("repository_url", mode="before")
    @classmethod
    def _trim_url(cls, v: Any) -> Any:
        return v.strip() if isinstance(v, str) else v

    # Falsy optionals mean "not supplied".
    @field_validator(
        "include_patterns",
        "exclude_patterns",
        "max_file_size",
        "branch",
        "github_token",
        mode="before",
    )
    @classmethod
    def _falsy_to_none(cls, v: Any) -> Any:
        if v is None or v == 0 or v == "" or v == []:
            return None
        return v
