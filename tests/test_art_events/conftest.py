"""Shared fixtures for art event parser tests."""

import pytest

from src.art_events.builder import EventRecordBuilder
from src.art_events.config import ArtEventsConfig
from src.art_events.deadline import DeadlineExtractor
from src.art_events.event_name import EventNameExtractor
from src.art_events.hashtags import HashtagExtractor
from src.art_events.keywords import KeywordClassifier
from src.art_events.rules import RuleTextExtractor


@pytest.fixture
def art_config():
    """Default parser config."""
    return ArtEventsConfig()


@pytest.fixture
def lean_config():
    """Lean profile config."""
    return ArtEventsConfig(mode="lean")


@pytest.fixture
def builder(art_config):
    """EventRecordBuilder with default config."""
    return EventRecordBuilder(config=art_config)


@pytest.fixture
def lean_builder(lean_config):
    """EventRecordBuilder with the lean profile."""
    return EventRecordBuilder.from_config(lean_config)


@pytest.fixture
def classifier():
    return KeywordClassifier()


@pytest.fixture
def hashtag_extractor():
    return HashtagExtractor()


@pytest.fixture
def deadline_extractor():
    return DeadlineExtractor()


@pytest.fixture
def name_extractor():
    return EventNameExtractor()


@pytest.fixture
def rule_extractor():
    return RuleTextExtractor()
