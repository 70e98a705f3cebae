"""Ordered extraction rules for loosely-shaped JSON responses.

The upstream API returns the same value under different keys depending on the
endpoint version, so callers list the known locations in priority order and
take the first non-empty hit.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, Sequence, TypeVar

T = TypeVar("T")

_MISSING = object()


@dataclass(frozen=True)
class ExtractionRule:
    path: tuple[str, ...]

    @classmethod
    def of(cls, dotted: str) -> "ExtractionRule":
        return cls(tuple(dotted.split(".")))

    @property
    def dotted(self) -> str:
        return ".".join(self.path)

    def lookup(self, body: Any) -> Any:
        node = body
        for key in self.path:
            if not isinstance(node, dict) or key not in node:
                return _MISSING
            node = node[key]
        return node


@dataclass(frozen=True)
class Extracted(Generic[T]):
    value: T
    rule: ExtractionRule

    @property
    def source(self) -> str:
        return self.rule.dotted


def rules(*dotted: str) -> tuple[ExtractionRule, ...]:
    return tuple(ExtractionRule.of(d) for d in dotted)


def is_present(value: Any) -> bool:
    # 0, "" and False count as absent, the same as the portal's own client.
    return value is not _MISSING and bool(value)


def extract_first(
    body: Any,
    ordered_rules: Sequence[ExtractionRule],
    *,
    accept: Optional[Callable[[Any], bool]] = None,
) -> Optional[Extracted[Any]]:
    """First present value that also passes ``accept`` (when given)."""
    for rule in ordered_rules:
        value = rule.lookup(body)
        if is_present(value) and (accept is None or accept(value)):
            return Extracted(value=value, rule=rule)
    return None
