"""Immutable snapshot values handed to the history store."""

from __future__ import annotations

from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Any, Mapping


def freeze(value: Any) -> Any:
    """Return a read-only deep copy of JSON-like data.

    dicts become ``MappingProxyType`` over a private dict, lists and tuples
    become tuples, sets become frozensets. Anything else is returned as-is
    and is assumed to be immutable already.
    """
    if isinstance(value, Mapping):
        return MappingProxyType({k: freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze(v) for v in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(freeze(v) for v in value)
    return value


def thaw(value: Any) -> Any:
    """Return an independent mutable copy of a frozen value."""
    if isinstance(value, Mapping):
        return {k: thaw(v) for k, v in value.items()}
    if isinstance(value, tuple):
        return [thaw(v) for v in value]
    if isinstance(value, frozenset):
        return {thaw(v) for v in value}
    return value


@dataclass(frozen=True)
class PostDraft:
    """Editable fields of a post."""
    headline: str = ""
    caption: str = ""
    hashtags: tuple[str, ...] = ()

    def with_changes(self, **changes) -> "PostDraft":
        if "hashtags" in changes:
            changes["hashtags"] = tuple(changes["hashtags"])
        return replace(self, **changes)
