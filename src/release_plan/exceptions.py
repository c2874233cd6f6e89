"""Exception hierarchy for release-plan.

All errors raised by this package derive from :class:`ReleasePlanError`
so callers can catch them in one place.
"""

from __future__ import annotations


class ReleasePlanError(Exception):
    """Base class for all release-plan errors."""


# -----------------------------------------------------------------------------
# Configuration
# -----------------------------------------------------------------------------


class ConfigError(ReleasePlanError):
    """Configuration could not be loaded."""


class ConfigNotFoundError(ConfigError):
    """No pyproject.toml was found."""


class ConfigValidationError(ConfigError):
    """The [tool.release-plan] table is invalid."""


# -----------------------------------------------------------------------------
# Versions
# -----------------------------------------------------------------------------


class VersionParseError(ReleasePlanError, ValueError):
    """A version string is not of the form X.Y.Z[-pre][+build]."""


# -----------------------------------------------------------------------------
# Source hosting
# -----------------------------------------------------------------------------


class HostingError(ReleasePlanError):
    """The source-hosting backend failed."""


class RemoteFileNotFoundError(HostingError):
    """A file does not exist on the requested branch."""

    def __init__(self, path: str) -> None:
        super().__init__(f"File not found: {path}")
        self.path = path


class MissingRequiredFileError(ReleasePlanError):
    """A file the release strategy cannot work without is missing.

    Attributes:
        path: Resolved path of the missing file
        strategy_name: Name of the strategy that required it
        repository: Repository identifier (``owner/repo``)
    """

    def __init__(self, path: str, strategy_name: str, repository: str) -> None:
        super().__init__(
            f"File '{path}' required by the {strategy_name} strategy "
            f"is missing in repository {repository}"
        )
        self.path = path
        self.strategy_name = strategy_name
        self.repository = repository
