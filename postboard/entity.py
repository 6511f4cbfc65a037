"""The post entity shared by every layer."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_FIELD_TYPES: dict[str, type] = {"id": int, "title": str, "text": str}


@dataclass
class Post:
    """A post with a numeric identifier, a title and a body text."""

    id: int = 0
    title: str = ""
    text: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON representation of the post."""
        return {"id": self.id, "title": self.title, "text": self.text}

    @classmethod
    def from_dict(cls, data: Any) -> "Post":
        """Build a post from decoded JSON.

        Keys match field names case-insensitively, unknown keys and null
        values are ignored, and a value of the wrong type raises TypeError.
        """
        if not isinstance(data, Mapping):
            raise TypeError(f"cannot decode a post from {type(data).__name__}")
        post = cls()
        for key, value in data.items():
            if not isinstance(key, str) or value is None:
                continue
            name = key.lower()
            expected = _FIELD_TYPES.get(name)
            if expected is None:
                continue
            if isinstance(value, bool) or not isinstance(value, expected):
                raise TypeError(f"field {name!r} must be of type {expected.__name__}")
            if expected is int and not _INT64_MIN <= value <= _INT64_MAX:
                raise ValueError(f"field {name!r} is out of range: {value}")
            setattr(post, name, value)
        return post