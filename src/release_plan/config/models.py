"""Configuration models for release-plan.

Configuration lives in ``[tool.release-plan]`` of pyproject.toml and is
validated with pydantic.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from release_plan.hosting import Repository


class PlainExtraFile(BaseModel):
    """An extra file given as a bare path."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["plain"] = "plain"
    path: str


class StructuredExtraFile(BaseModel):
    """An extra file with a format-specific selector (JSONPath, XPath, ...)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["generic", "json", "xml", "yaml", "toml"]
    path: str
    selector: str | None = None


ExtraFile = Annotated[PlainExtraFile | StructuredExtraFile, Field(discriminator="kind")]


class RepositoryConfig(BaseModel):
    """Hosted repository coordinates."""

    owner: str = ""
    repo: str = ""

    def to_repository(self) -> Repository:
        return Repository(owner=self.owner, repo=self.repo)


class VersioningConfig(BaseModel):
    """Options for the default versioning strategy."""

    bump_minor_pre_major: bool = False
    bump_patch_for_minor_pre_major: bool = False


class StrategyConfig(BaseModel):
    """Settings of one release strategy instance (one module of the repo)."""

    model_config = ConfigDict(extra="forbid")

    path: str = "."
    target_branch: str = "main"
    changelog_path: Path = Path("CHANGELOG.md")
    skip_changelog: bool = False
    skip_snapshot: bool = False
    primary_artifact: str | None = None
    extra_files: list[ExtraFile] = Field(default_factory=list)
    repository: RepositoryConfig = Field(default_factory=RepositoryConfig)
    versioning: VersioningConfig = Field(default_factory=VersioningConfig)

    @field_validator("extra_files", mode="before")
    @classmethod
    def _coerce_plain_paths(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return value
        return [{"kind": "plain", "path": item} if isinstance(item, str) else item for item in value]

    @property
    def plain_extra_files(self) -> list[str]:
        """Paths of the extra files given as plain paths."""
        return [f.path for f in self.extra_files if isinstance(f, PlainExtraFile)]
