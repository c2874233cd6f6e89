"""Release strategy for multi-artifact Java repositories.

Every artifact's version is tracked in a ``versions.txt`` manifest at the
module root. A release bumps each entry of the manifest and rewrites the
version markers in every pom.xml, build.gradle and dependencies.properties
found under the root.

Snapshot releases (``-SNAPSHOT``) are produced when the manifest says so
and do not touch the changelog.

Usage::

    strategy = JavaYoshiStrategy(config=config, host=host, codec=codec)
    versions = await strategy.build_versions_map()
    versions = await strategy.update_versions_map(versions, commits)
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import structlog

from release_plan.core.artifacts import is_stable_artifact
from release_plan.core.commits import ensure_non_empty, is_promotion_commit, strip_promotion_notes
from release_plan.core.version import Version
from release_plan.core.versioning import DefaultVersioningStrategy
from release_plan.exceptions import MissingRequiredFileError, RemoteFileNotFoundError
from release_plan.manifest import VERSIONS_MANIFEST_FILE
from release_plan.strategies.base import add_path
from release_plan.update import ChangelogUpdater, JavaUpdater, Update, VersionsManifestUpdater

if TYPE_CHECKING:
    from collections.abc import Sequence

    from release_plan.config.models import StrategyConfig
    from release_plan.core.commits import ConventionalCommit
    from release_plan.core.version import VersionsMap
    from release_plan.core.versioning import VersioningStrategy
    from release_plan.hosting import FileContents, SourceHost
    from release_plan.manifest import VersionsManifestCodec
    from release_plan.strategies.base import BuildUpdatesOptions

logger = structlog.get_logger(__name__)

# Searched concurrently, appended to the plan in this order.
BUILD_FILE_NAMES = ("pom.xml", "build.gradle", "dependencies.properties")

PROMOTED_VERSION = Version(1, 0, 0)
INITIAL_VERSION = Version(0, 1, 0)


class JavaYoshiStrategy:
    """Java strategy driven by a versions.txt manifest.

    One instance serves one release cycle at a time: the manifest is
    fetched at most once and cached on the instance without locking, so
    do not run two cycles concurrently on the same instance.
    """

    name = "JavaYoshi"

    def __init__(
        self,
        config: StrategyConfig,
        host: SourceHost,
        codec: VersionsManifestCodec,
        versioning_strategy: VersioningStrategy | None = None,
    ) -> None:
        self.config = config
        self.host = host
        self.codec = codec
        self.versioning_strategy = versioning_strategy or DefaultVersioningStrategy(
            bump_minor_pre_major=config.versioning.bump_minor_pre_major,
            bump_patch_for_minor_pre_major=config.versioning.bump_patch_for_minor_pre_major,
        )
        self.repository = config.repository.to_repository()
        self._versions_content: FileContents | None = None

    def add_path(self, file: str) -> str:
        return add_path(self.config.path, file)

    async def post_process_commits(
        self, commits: Sequence[ConventionalCommit]
    ) -> list[ConventionalCommit]:
        """Push a fake commit when there are none so a snapshot is still released."""
        return ensure_non_empty(commits)

    async def needs_snapshot(self) -> bool:
        if self.config.skip_snapshot:
            return False
        contents = await self.get_versions_content()
        return self.codec.needs_snapshot(contents.parsed_content)

    async def build_versions_map(self) -> VersionsMap:
        contents = await self.get_versions_content()
        return self.codec.parse_versions(contents.parsed_content)

    async def get_versions_content(self) -> FileContents:
        """Fetch versions.txt once and cache it on the instance.

        Raises:
            MissingRequiredFileError: If versions.txt is not on the target branch
        """
        if self._versions_content is None:
            path = self.add_path(VERSIONS_MANIFEST_FILE)
            try:
                self._versions_content = await self.host.get_file_contents_on_branch(
                    path, self.config.target_branch
                )
            except RemoteFileNotFoundError as e:
                raise MissingRequiredFileError(path, self.name, str(self.repository)) from e
            logger.debug("versions_fetched", path=path, branch=self.config.target_branch)
        return self._versions_content

    async def update_versions_map(
        self, versions_map: VersionsMap, commits: Sequence[ConventionalCommit]
    ) -> VersionsMap:
        """Bump every artifact of ``versions_map`` in place.

        A ``RELEASE AS: 1.0.0`` note on any commit promotes every stable
        artifact straight to 1.0.0; pre-stable lines (``-v2beta``) keep
        the regular bump. Promotion notes are removed before the commits
        reach the versioning strategy.
        """
        is_promotion = any(is_promotion_commit(commit) for commit in commits)
        modified_commits = [strip_promotion_notes(commit) for commit in commits]

        for key in list(versions_map):
            version = versions_map.get(key)
            if version is None:
                logger.warning("version_not_found", artifact=key)
                continue
            if is_promotion and is_stable_artifact(key):
                versions_map[key] = PROMOTED_VERSION
            else:
                versions_map[key] = await self.versioning_strategy.bump(version, modified_commits)
        return versions_map

    async def build_updates(self, options: BuildUpdatesOptions) -> list[Update]:
        version = options.new_version
        versions_map = options.versions_map

        updates = [
            Update(
                path=self.add_path(VERSIONS_MANIFEST_FILE),
                create_if_missing=False,
                cached_file_contents=self._versions_content,
                updater=VersionsManifestUpdater(version=version, versions_map=versions_map),
            )
        ]

        found = await asyncio.gather(
            *(
                self.host.find_files_by_filename_and_ref(
                    filename, self.config.target_branch, self.config.path
                )
                for filename in BUILD_FILE_NAMES
            )
        )
        for filename, paths in zip(BUILD_FILE_NAMES, found, strict=True):
            logger.debug("build_files_found", filename=filename, count=len(paths))
            updates.extend(
                Update(
                    path=self.add_path(path),
                    create_if_missing=False,
                    updater=JavaUpdater(
                        version=version,
                        versions_map=versions_map,
                        is_snapshot=options.is_snapshot,
                    ),
                )
                for path in paths
            )

        updates.extend(
            Update(
                path=path,
                create_if_missing=False,
                updater=JavaUpdater(
                    version=version,
                    versions_map=versions_map,
                    is_snapshot=options.is_snapshot,
                ),
            )
            for path in self.config.plain_extra_files
        )

        if not options.is_snapshot and not self.config.skip_changelog:
            updates.append(
                Update(
                    path=self.add_path(self.config.changelog_path.as_posix()),
                    create_if_missing=True,
                    updater=ChangelogUpdater(
                        version=version, changelog_entry=options.changelog_entry
                    ),
                )
            )

        return updates

    def initial_release_version(self) -> Version:
        return INITIAL_VERSION
