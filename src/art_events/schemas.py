"""Schema definitions for parsed art events.

Provides the EventRecord dataclass handed to the storage collaborator and the
Classification result explaining why a post was (or was not) treated as an
event.
"""

from dataclasses import dataclass, field
from typing import Any, Literal

Tier = Literal["exclude", "strong", "weak+structure", "hashtag", "none"]


@dataclass
class EventRecord:
    """
    A structured art event extracted from a single post.

    Storage-layer fields (id, completion flag, memo, saved timestamp) are
    attached by the persistence collaborator and are not part of this record.

    Attributes:
        origin_ref: Opaque identifier of the source post (usually its URL).
        event_name: Selected or synthesized title. Never empty.
        deadline: ISO-8601 timestamp of the deadline, or None when no date was found.
        hashtags: Hashtags in first-seen order, without duplicates.
        rules: Non-empty trimmed lines of the post body.
        images: Image URLs supplied by the caller.
        raw_text: The original post text, unmodified.
    """

    origin_ref: str
    event_name: str
    raw_text: str
    deadline: str | None = None
    hashtags: list[str] = field(default_factory=list)
    rules: list[str] = field(default_factory=list)
    images: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert record to dictionary for JSON serialization."""
        return {
            "origin_ref": self.origin_ref,
            "event_name": self.event_name,
            "deadline": self.deadline,
            "hashtags": list(self.hashtags),
            "rules": list(self.rules),
            "images": list(self.images),
            "raw_text": self.raw_text,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EventRecord":
        """
        Create EventRecord from dictionary.

        Args:
            data: Dictionary with record fields.

        Returns:
            EventRecord instance.

        Raises:
            KeyError: If origin_ref, event_name or raw_text is missing.
        """
        return cls(
            origin_ref=data["origin_ref"],
            event_name=data["event_name"],
            raw_text=data["raw_text"],
            deadline=data.get("deadline"),
            hashtags=list(data.get("hashtags", [])),
            rules=list(data.get("rules", [])),
            images=list(data.get("images", [])),
        )


@dataclass(frozen=True)
class Classification:
    """Outcome of keyword classification with the tier that decided it."""

    is_event: bool
    tier: Tier
    matched: tuple[str, ...] = ()

    def __bool__(self) -> bool:
        return self.is_event
