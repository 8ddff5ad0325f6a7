"""Version model — parsing and total ordering of release and snapshot versions.

Parsing splits on ``.``, ``-`` and ``_``. Numeric tokens become ints, the
``SNAPSHOT`` qualifier (any case) marks the version unstable and is dropped
from the segment list. Everything else is kept as text.

Ordering rules
--------------
- Segments are compared left to right; int vs int compares numerically.
- Any other pairing (text vs text, text vs int) compares the string forms
  lexically. Malformed input never raises; ``"1.x"`` sorts above ``"1.2"``
  because ``"x" > "2"``.
- The lexical fallback is not transitive across mixed int/text segments:
  ``2 < 10`` and ``10 < 1rc1`` but ``2 > 1rc1``. Sorting such a mix is
  order-dependent; pure numeric and pure text versions sort consistently.
- A missing trailing segment is lower than a present one (``1.2 < 1.2.0``).
- On a full segment tie: two unstable versions are EQUAL, a release is
  HIGHER than an unstable version, and two releases are EQUAL only when
  their raw strings are identical (otherwise the raw strings decide).
"""

from __future__ import annotations

import re
from enum import Enum

from pydantic import BaseModel, ConfigDict

UNSTABLE_QUALIFIER = "SNAPSHOT"

_SEPARATORS = re.compile(r"[.\-_]")

Segment = int | str


class Comparison(str, Enum):
    """Outcome of comparing two versions, read as ``a`` is ... than ``b``."""

    LOWER = "lower"
    EQUAL = "equal"
    HIGHER = "higher"

    def inverse(self) -> Comparison:
        if self is Comparison.LOWER:
            return Comparison.HIGHER
        if self is Comparison.HIGHER:
            return Comparison.LOWER
        return self


def _sign(a: object, b: object) -> Comparison:
    if a < b:  # type: ignore[operator]
        return Comparison.LOWER
    if a > b:  # type: ignore[operator]
        return Comparison.HIGHER
    return Comparison.EQUAL


def _compare_segment(a: Segment, b: Segment) -> Comparison:
    if isinstance(a, int) and isinstance(b, int):
        return _sign(a, b)
    return _sign(str(a), str(b))


class Version(BaseModel):
    """An immutable parsed version string."""

    model_config = ConfigDict(frozen=True)

    raw: str
    segments: tuple[Segment, ...] = ()
    unstable: bool = False

    @classmethod
    def parse(cls, text: str) -> Version:
        """Parse *text* into a Version. Never raises on malformed input."""
        segments: list[Segment] = []
        unstable = False
        for token in _SEPARATORS.split(text.strip()):
            if not token:
                continue
            if token.upper() == UNSTABLE_QUALIFIER:
                unstable = True
            elif token.isdigit():
                segments.append(int(token))
            else:
                segments.append(token)
        return cls(raw=text, segments=tuple(segments), unstable=unstable)

    @property
    def is_unstable(self) -> bool:
        return self.unstable

    def compare(self, other: Version) -> Comparison:
        return compare(self, other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) is Comparison.EQUAL

    def __hash__(self) -> int:
        if self.unstable:
            return hash((self.segments, True))
        return hash((self.segments, self.raw))

    def __lt__(self, other: Version) -> bool:
        return compare(self, other) is Comparison.LOWER

    def __le__(self, other: Version) -> bool:
        return compare(self, other) is not Comparison.HIGHER

    def __gt__(self, other: Version) -> bool:
        return compare(self, other) is Comparison.HIGHER

    def __ge__(self, other: Version) -> bool:
        return compare(self, other) is not Comparison.LOWER

    def __str__(self) -> str:
        return self.raw


def _coerce(value: Version | str) -> Version:
    return value if isinstance(value, Version) else Version.parse(value)


def compare(a: Version | str, b: Version | str) -> Comparison:
    """Compare two versions (or version strings); the result is total."""
    left, right = _coerce(a), _coerce(b)

    for seg_a, seg_b in zip(left.segments, right.segments):
        result = _compare_segment(seg_a, seg_b)
        if result is not Comparison.EQUAL:
            return result

    if len(left.segments) != len(right.segments):
        return _sign(len(left.segments), len(right.segments))

    if left.unstable and right.unstable:
        return Comparison.EQUAL
    if left.unstable != right.unstable:
        return Comparison.LOWER if left.unstable else Comparison.HIGHER
    return _sign(left.raw, right.raw)


def is_unstable(version: Version | str) -> bool:
    """Return True for snapshot (in-progress) versions."""
    return _coerce(version).unstable
