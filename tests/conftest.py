"""Pytest fixtures for art-event-manager tests."""

from datetime import datetime

import pytest

from src.art_events.builder import get_builder
from src.config.settings import Settings, get_settings


@pytest.fixture(autouse=True)
def _clear_cached_settings():
    """Cached settings and builders must not leak env changes between tests."""
    get_settings.cache_clear()
    get_builder.cache_clear()
    yield
    get_settings.cache_clear()
    get_builder.cache_clear()


@pytest.fixture
def test_settings() -> Settings:
    """Settings configured for testing."""
    return Settings(environment="development", log_level="DEBUG")


@pytest.fixture
def reference_now() -> datetime:
    """Fixed reference instant so year inference is reproducible."""
    return datetime(2024, 3, 1)


@pytest.fixture
def contest_post() -> str:
    """A typical contest announcement."""
    return (
        "第3回AIアート選手権 開催！\n"
        "テーマ：春の訪れ\n"
        "開催期間：3/1～3/31\n"
        "参加方法：#春AIアート杯 をつけて投稿\n"
        "\n"
        "【注意事項】\n"
        "・1人3枚まで\n"
        "・R18はNG"
    )


@pytest.fixture
def news_post() -> str:
    """A post mentioning a contest but reporting news."""
    return "【速報】AIアートコンテストの結果が発表されました！まとめ記事はこちら"
