"""
Art event detection for social-media posts.

This module classifies post text to find art call-for-entries / contest
announcements and extracts a structured record from them. Everything is
pure and synchronous: callers supply the text, an origin reference, optional
image URLs and the reference instant.

Components:
- ArtEventsConfig: Configuration for the parser (profile, limits, fallback titles)
- EventRecord: Dataclass representing a parsed event post
- KeywordClassifier: Four-tier keyword gate
- HashtagExtractor: Hashtag finder with first-seen dedup
- DeadlineExtractor: Ordered date patterns with year inference
- EventNameExtractor: First-match-wins title cascade
- RuleTextExtractor: Body lines kept for context
- EventRecordBuilder: Composes the above into one entry point
"""

from src.art_events.builder import (
    EventRecordBuilder,
    build,
    extract_deadline,
    extract_event_name,
    extract_hashtags,
    extract_rules,
    get_builder,
    is_event,
)
from src.art_events.config import ArtEventsConfig
from src.art_events.deadline import DeadlineExtractor
from src.art_events.event_name import EventNameExtractor
from src.art_events.hashtags import HashtagExtractor
from src.art_events.keywords import KeywordClassifier
from src.art_events.rules import RuleTextExtractor
from src.art_events.schemas import Classification, EventRecord

__all__ = [
    "ArtEventsConfig",
    "Classification",
    "DeadlineExtractor",
    "EventNameExtractor",
    "EventRecord",
    "EventRecordBuilder",
    "HashtagExtractor",
    "KeywordClassifier",
    "RuleTextExtractor",
    "build",
    "extract_deadline",
    "extract_event_name",
    "extract_hashtags",
    "extract_rules",
    "get_builder",
    "is_event",
]
