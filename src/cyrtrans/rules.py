"""Rule tiers of a transliteration schema"""

from types import MappingProxyType
from typing import Hashable
from typing import Iterator
from typing import Mapping
from typing import Optional
from typing import Set
from typing import Tuple

from .misc import MIN_ENDING_WORD_LEN


__all__ = ['Rule', 'BaseRule', 'ContextRule', 'EndingRule', 'PREV', 'NEXT']

PREV = 'prev'
NEXT = 'next'


def _lower(char: Optional[str]) -> Optional[str]:
    return None if char is None else char.lower()


class Rule:
    """Parent class for the rule tiers. A Rule is a read-only table from
    lowercase keys to Latin replacements.
    """
    __slots__ = ['table']
    table: Mapping[Hashable, str]

    def __init__(self, table: Mapping[Hashable, str]):
        object.__setattr__(self, 'table', MappingProxyType(dict(table)))

    def __setattr__(self, name, value):
        raise AttributeError(f'{type(self).__name__} is immutable')

    def __delattr__(self, name):
        raise AttributeError(f'{type(self).__name__} is immutable')

    def __repr__(self):
        return f'{type(self).__name__}({len(self.table)} entries)'

    def __len__(self):
        return len(self.table)

    def __bool__(self):
        return bool(self.table)

    def __iter__(self) -> Iterator:
        return iter(self.table)

    def __contains__(self, key):
        return key in self.table

    def letters(self) -> Set[str]:
        """All characters used in the keys of this table."""
        out = set()
        for key in self.table:
            out.update(char for char in key if char is not None)
        return out

    def lookup(self, prev: Optional[str], cur: str,
               next_: Optional[str]) -> Optional[str]:
        """Replacement for ``cur`` between ``prev`` and ``next_``, or
        ``None`` if this tier has nothing to say. ``None`` neighbors stand
        for word boundaries.
        """
        raise NotImplementedError


class BaseRule(Rule):
    """Default one-character mapping."""
    __slots__ = []

    def lookup(self, prev, cur, next_):
        return self.table.get(cur.lower())


class ContextRule(Rule):
    """Override keyed by the current character and one of its neighbors.

    Keys are pairs. For a ``PREV`` rule the pair is ``(prev, cur)`` and for a
    ``NEXT`` rule it is ``(cur, next)``. A ``None`` neighbor in a key matches
    only at the corresponding edge of a word.
    """
    __slots__ = ['side']
    side: str

    def __init__(self, table: Mapping[Tuple[Optional[str], Optional[str]], str],
                 side: str):
        if side not in (PREV, NEXT):
            raise ValueError(f'side must be {PREV!r} or {NEXT!r}, not {side!r}')  # noqa: E501
        super().__init__(table)
        object.__setattr__(self, 'side', side)

    def __repr__(self):
        return f'ContextRule({self.side}, {len(self.table)} entries)'

    def lookup(self, prev, cur, next_):
        if self.side == PREV:
            key = (_lower(prev), cur.lower())
        else:
            key = (cur.lower(), _lower(next_))
        return self.table.get(key)


class EndingRule(Rule):
    """Word-final substitutions.

    The longest pattern that is a suffix of the word wins. Patterns of equal
    length are tried in the order they were declared.
    """
    __slots__ = ['_patterns']
    _patterns: Tuple[str, ...]

    def __init__(self, table: Mapping[str, str]):
        super().__init__(table)
        patterns = sorted(self.table, key=len, reverse=True)  # sort is stable
        object.__setattr__(self, '_patterns', tuple(patterns))

    def lookup(self, prev, cur, next_):
        """Ending rules apply to whole words; see :py:meth:`match`."""
        return None

    def match(self, word: str) -> Optional[Tuple[int, str]]:
        """Return ``(start, replacement)`` for the ending of ``word``, where
        ``start`` is the index at which the matched ending begins, or
        ``None`` if no ending applies.

        Endings only apply to words of at least ``MIN_ENDING_WORD_LEN``
        characters, and never consume the whole word.
        """
        if len(word) < MIN_ENDING_WORD_LEN:
            return None
        for pattern in self._patterns:
            start = len(word) - len(pattern)
            if start > 0 and word[start:].lower() == pattern:
                return start, self.table[pattern]
        return None
