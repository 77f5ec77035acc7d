"""Statement-to-question rewriting for the fallback paths."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Tuple

_TRAILING_STOP = re.compile(r"[.!]\Z")


@dataclass(frozen=True)
class Transformed:
    text: str
    confidence: float


@dataclass(frozen=True)
class _Rule:
    name: str
    markers: Tuple[str, ...]
    render: Callable[[str], str]
    confidence: float

    def applies(self, lower: str) -> bool:
        return any(m in lower for m in self.markers)


# Checked in order against the lower-cased statement; first hit wins.
_RULES: Tuple[_Rule, ...] = (
    _Rule("definition", (" is ", " are "), lambda s: f"What {s}?", 0.7),
    _Rule(
        "possession",
        (" has ", " have "),
        lambda s: f"What applications or features {s.replace(' has ', ' have ', 1)}?",
        0.68,
    ),
    _Rule("ability", (" can ", " could "), lambda s: f"How {s}?", 0.65),
)


def _generic(lower: str) -> Transformed:
    return Transformed(f"What about {_TRAILING_STOP.sub('', lower, count=1)}?", 0.6)


def transform_to_question(statement: str) -> Transformed:
    """Rephrase ``statement`` as a question.

    Text that already carries a ``?`` is returned untouched at 0.95; other
    statements are lower-cased and wrapped by the first matching rule.
    """

    if "?" in statement:
        return Transformed(statement, 0.95)
    lower = statement.lower()
    rule = next((r for r in _RULES if r.applies(lower)), None)
    return Transformed(rule.render(lower), rule.confidence) if rule else _generic(lower)


__all__ = ["Transformed", "transform_to_question"]
