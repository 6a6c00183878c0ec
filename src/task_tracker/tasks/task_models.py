# src/task_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum

RENDER_TIME_FORMAT = "%d-%m-%Y %H:%M:%S"
RENDER_SEPARATOR = "-" * 25


def _now_local() -> datetime:
    return datetime.now().astimezone()


class Priority(StrEnum):
    """
    Task priority.

    The value is both the display label and the serialized tag.
    There is no ordering between priorities beyond display.
    """

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def parse(cls, raw: str | None) -> tuple[Priority, bool]:
        """
        Case-insensitive parse of user input.

        Returns (priority, recognized). Unknown or empty input falls back to LOW
        with recognized=False so the caller can warn about it.
        """
        key = (raw or "").strip().lower()
        for p in cls:
            if p.value.lower() == key:
                return p, True
        return cls.LOW, False

    @classmethod
    def from_tag(cls, tag: str) -> Priority:
        """Exact match on the serialized tag. Raises ValueError otherwise."""
        return cls(tag)


@dataclass(slots=True)
class Task:
    name: str
    description: str
    priority: Priority = Priority.LOW
    created_at: datetime = field(default_factory=_now_local)

    def __post_init__(self) -> None:
        # Naive timestamps are taken as local time.
        if self.created_at.tzinfo is None:
            self.created_at = self.created_at.astimezone()

    @classmethod
    def create(cls, name: str, description: str, priority: Priority) -> Task:
        return cls(name=name, description=description, priority=priority)

    def priority_label(self) -> str:
        return self.priority.label

    def render(self) -> str:
        return "\n".join(
            [
                f"Task Name: {self.name}",
                f"Description: {self.description}",
                f"Priority: {self.priority_label()}",
                f"Added on: {self.created_at.strftime(RENDER_TIME_FORMAT)}",
                RENDER_SEPARATOR,
            ]
        )
