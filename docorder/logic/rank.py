"""Fractional rank keys for lexicographically ordered documents.

Keys are strings over an ascending alphabet and compare with plain string
comparison. A key is read as a base-N fraction (``"i"`` is 18/36 in the
default base-36 alphabet), so a key strictly between any two distinct keys
can always be produced by bisecting the digits, growing the key by one
digit when adjacent digits leave no room.

No FastAPI/Starlette imports. The reorder engine only depends on the
``RankSpace`` protocol; ``RankGenerator`` is the default implementation.
"""

from __future__ import annotations

from typing import List, Protocol
import logging

logger = logging.getLogger(__name__)

BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"
DEFAULT_WIDTH = 6


class RankError(ValueError):
    """Raised when a key is malformed or an interval holds no key."""

    code = "RANK_INVALID_INTERVAL"


class RankSpace(Protocol):
    def min_key(self) -> str: ...

    def max_key(self) -> str: ...

    def between(self, low: str, high: str) -> str: ...


class RankGenerator:
    """Default ``RankSpace`` over a fixed-width, densely ordered key space.

    ``min_key()`` and ``max_key()`` are the first and last alphabet digit
    repeated ``width`` times (``"000000"`` and ``"zzzzzz"`` by default).
    Every key produced by ``between`` or ``seed`` lies strictly inside them.
    """

    def __init__(self, alphabet: str = BASE36, width: int = DEFAULT_WIDTH) -> None:
        if len(alphabet) < 3 or list(alphabet) != sorted(set(alphabet)):
            raise RankError("alphabet must hold at least 3 strictly ascending characters")
        if width <= 0:
            raise RankError("width must be positive")
        self.alphabet = alphabet
        self.width = width
        self._zero = alphabet[0]

    def min_key(self) -> str:
        return self._zero * self.width

    def max_key(self) -> str:
        return self.alphabet[-1] * self.width

    def is_valid(self, key: str) -> bool:
        """Return True when ``key`` is non-empty and uses only alphabet digits."""
        return isinstance(key, str) and bool(key) and all(c in self.alphabet for c in key)

    def between(self, low: str, high: str) -> str:
        """Return a key ``k`` with ``low < k < high`` under string comparison.

        Trailing zero digits carry no value and are dropped before bisecting;
        the result still orders correctly against the original strings.
        Raises ``RankError`` when ``low >= high``, when the two keys differ
        only by trailing zeros (``"b"`` and ``"b0"``), or on foreign digits.
        """
        for key in (low, high):
            if not self.is_valid(key):
                raise RankError(f"invalid rank key: {key!r}")
        if low >= high:
            raise RankError(f"rank keys out of order: {low!r} >= {high!r}")
        a = low.rstrip(self._zero)
        b = high.rstrip(self._zero)
        if a >= b:
            raise RankError(f"no rank key fits between {low!r} and {high!r}")
        return self._midpoint(a, b)

    def seed(self, count: int) -> List[str]:
        """Return ``count`` evenly spaced, strictly increasing keys.

        Used to initialise a list whose documents carry no keys yet.
        """
        if count < 0:
            raise RankError("count must not be negative")
        base = len(self.alphabet)
        space = base ** self.width
        if count >= space - 1:
            raise RankError(f"cannot seed {count} keys at width {self.width}")
        keys: List[str] = []
        for i in range(1, count + 1):
            value = space * i // (count + 1)
            keys.append(self._encode(value).rstrip(self._zero))
        logger.info("rank.seed count=%s first=%s last=%s", count, keys[:1], keys[-1:])
        return keys

    def _encode(self, value: int) -> str:
        base = len(self.alphabet)
        digits = []
        for _ in range(self.width):
            value, rem = divmod(value, base)
            digits.append(self.alphabet[rem])
        return "".join(reversed(digits))

    def _midpoint(self, a: str, b: str | None) -> str:
        # a and b carry no trailing zeros; b of None stands for the upper bound 1.0
        digits = self.alphabet
        if b is not None:
            n = 0
            while n < len(b) and (a[n] if n < len(a) else self._zero) == b[n]:
                n += 1
            if n > 0:
                return b[:n] + self._midpoint(a[n:], b[n:])
        digit_a = digits.index(a[0]) if a else 0
        digit_b = digits.index(b[0]) if b is not None else len(digits)
        if digit_b - digit_a > 1:
            return digits[(digit_a + digit_b + 1) // 2]
        if b is not None and len(b) > 1:
            return b[:1]
        return digits[digit_a] + self._midpoint(a[1:], None)


__all__ = ["BASE36", "DEFAULT_WIDTH", "RankError", "RankSpace", "RankGenerator"]
