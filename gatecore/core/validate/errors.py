# gatecore/core/validate/errors.py
"""
Error collector: the accumulator of named validation failures.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Optional, Tuple

from ...config import get_config


class ErrorCollector:
    """
    Ordered mapping of key -> messages.

    Keys are attribute names, or the reserved base key for errors that
    concern the whole object. Messages are kept in insertion order and
    are never deduplicated.
    """

    def __init__(self, default_message: Optional[str] = None, base_key: Optional[str] = None) -> None:
        errors_config = get_config().errors
        self.default_message = default_message if default_message is not None else errors_config.default_message
        self.base_key = base_key if base_key is not None else errors_config.base_key
        self._messages: Dict[str, List[str]] = {}

    # ---- mutation ----

    def add(self, key: str, message: Optional[str] = None) -> None:
        if not isinstance(key, str):
            raise TypeError(f"error key must be a string, got {type(key).__name__}")
        if message is None:
            message = self.default_message
        self._messages.setdefault(key, []).append(message)

    def add_base(self, message: Optional[str] = None) -> None:
        self.add(self.base_key, message)

    def merge(self, other: "ErrorCollector") -> "ErrorCollector":
        """Append every entry of ``other``; returns self for chaining."""
        for key, message in list(other):
            self.add(key, message)
        return self

    def clear(self) -> None:
        self._messages.clear()

    # ---- queries ----

    def is_empty(self) -> bool:
        return not self.any()

    def any(self) -> bool:
        return any(self._messages.values())

    def keys(self) -> List[str]:
        return [key for key, messages in self._messages.items() if messages]

    def messages(self) -> Dict[str, List[str]]:
        return {key: list(messages) for key, messages in self._messages.items() if messages}

    def full_messages(self) -> List[str]:
        """
        Human-readable messages.

        Base messages are returned verbatim; others are prefixed with the
        humanized key, e.g. ("first_name", "is blank") -> "First name is blank".
        """
        out = []
        for key, message in self:
            if key == self.base_key:
                out.append(message)
            else:
                out.append(f"{_humanize(key)} {message}")
        return out

    def to_dict(self) -> Dict[str, List[str]]:
        return self.messages()

    # ---- container protocol ----

    def __getitem__(self, key: str) -> List[str]:
        return list(self._messages.get(key, []))

    def __contains__(self, key: Any) -> bool:
        return bool(self._messages.get(key))

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        for key, messages in self._messages.items():
            for message in messages:
                yield key, message

    def __len__(self) -> int:
        return sum(len(messages) for messages in self._messages.values())

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ErrorCollector):
            return NotImplemented
        return self.messages() == other.messages()

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"ErrorCollector({self.messages()!r})"


def _humanize(key: str) -> str:
    text = key.replace("_", " ").strip()
    return text[:1].upper() + text[1:]
