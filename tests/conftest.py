"""Shared test fixtures."""

from __future__ import annotations

import pytest

from release_plan.config.models import RepositoryConfig, StrategyConfig
from release_plan.core.commits import ConventionalCommit, Note
from release_plan.strategies.java_yoshi import JavaYoshiStrategy
from tests._fakes import VERSIONS_TXT, FakeCodec, FakeHost, make_commit


@pytest.fixture
def promotion_note() -> Note:
    return Note(title="RELEASE AS", text="1.0.0")


@pytest.fixture
def fix_commit() -> ConventionalCommit:
    return make_commit("fix", sha="fix123")


@pytest.fixture
def feat_commit() -> ConventionalCommit:
    return make_commit("feat", sha="feat123")


@pytest.fixture
def breaking_commit() -> ConventionalCommit:
    return make_commit("feat", sha="break123", breaking=True)


@pytest.fixture
def strategy_config() -> StrategyConfig:
    return StrategyConfig(repository=RepositoryConfig(owner="googleapis", repo="java-core"))


@pytest.fixture
def host() -> FakeHost:
    return FakeHost(files={"versions.txt": VERSIONS_TXT})


@pytest.fixture
def codec() -> FakeCodec:
    return FakeCodec()


@pytest.fixture
def strategy(strategy_config: StrategyConfig, host: FakeHost, codec: FakeCodec) -> JavaYoshiStrategy:
    return JavaYoshiStrategy(config=strategy_config, host=host, codec=codec)
