"""Transliteration schema: a named, immutable rule set"""

import json
import os
from pathlib import Path
from typing import Any
from typing import Dict
from typing import Iterable
from typing import Mapping
from typing import Optional
from typing import Tuple
from typing import Union
from warnings import warn

from .rules import BaseRule
from .rules import ContextRule
from .rules import EndingRule
from .rules import NEXT
from .rules import PREV
from .rules import Rule


__all__ = ['Schema', 'SchemaError', 'UnmappedCharacterError']

SCHEMA_KEYS = ('name', 'description', 'url', 'aliases', 'caps_words',
               'mapping', 'prev_mapping', 'next_mapping', 'ending_mapping',
               'samples')


class SchemaError(ValueError):
    """Schema data is malformed."""


class UnmappedCharacterError(SchemaError):
    """A character has no entry in the base mapping of a schema."""


def _lowercase_table(table: Optional[Mapping[str, str]], table_name: str,
                     schema_name: str) -> Dict[str, str]:
    """Validate types and lowercase the keys of a raw table from a schema
    file. Keys that collide after lowercasing are an error.
    """
    if table is None:
        return {}
    if not isinstance(table, Mapping):
        raise SchemaError(f'{schema_name}: {table_name} must be a mapping, '
                          f'not {type(table).__name__}')
    out: Dict[str, str] = {}
    for key, value in table.items():
        if not isinstance(key, str) or not key:
            raise SchemaError(f'{schema_name}: {table_name} has an invalid '
                              f'key {key!r}')
        if not isinstance(value, str):
            raise SchemaError(f'{schema_name}: {table_name}[{key!r}] must be '
                              f'a string, not {value!r}')
        lowered = key.lower()
        if lowered in out:
            raise SchemaError(f'{schema_name}: {table_name} has more than one '
                              f'entry for {lowered!r}')
        out[lowered] = value
    return out


def _context_table(table: Dict[str, str], side: str, table_name: str,
                   schema_name: str) -> Dict[Tuple[Optional[str], Optional[str]], str]:  # noqa: E501
    """Convert string keys to ``ContextRule`` pairs. A one-character key
    stands for the current character at the edge of a word: the start of
    the word for ``prev_mapping``, the end for ``next_mapping``.
    """
    out = {}
    for key, value in table.items():
        if len(key) == 2:
            pair = (key[0], key[1])
        elif len(key) == 1:
            pair = (None, key) if side == PREV else (key, None)
        else:
            raise SchemaError(f'{schema_name}: {table_name} keys must be one '
                              f'or two characters long, not {key!r}')
        out[pair] = value
    return out


def _context_strings(rule: ContextRule) -> Dict[str, str]:
    return {''.join(char for char in pair if char is not None): value
            for pair, value in rule.table.items()}


class Schema:
    """Named transliteration rule set.

    A Schema holds four rule tiers, applied in a fixed order of precedence:
    ending rules, then next-context rules, then prev-context rules, then the
    base mapping. Schemas are validated on construction and immutable
    afterwards, so one object can be shared by any number of callers.

    Example
    -------

    >>> schema = Schema('tiny', {'ю': 'yu', 'л': 'l', 'и': 'i', 'я': 'ya'})
    >>> schema.lookup_base('Ю')
    'yu'
    """
    __slots__ = ['_base', '_ending', '_next', '_prev', 'aliases', 'caps_words',
                 'description', 'letter_rules', 'name', 'samples', 'url']
    _base: BaseRule
    _ending: EndingRule
    _next: ContextRule
    _prev: ContextRule
    aliases: Tuple[str, ...]
    caps_words: bool
    description: str
    letter_rules: Tuple[Rule, ...]
    name: str
    samples: Tuple[Tuple[str, str], ...]
    url: str

    def __init__(self, name: str, mapping: Mapping[str, str],
                 prev_mapping: Optional[Mapping[str, str]] = None,
                 next_mapping: Optional[Mapping[str, str]] = None,
                 ending_mapping: Optional[Mapping[str, str]] = None, *,
                 description: str = '', url: str = '',
                 aliases: Iterable[str] = (),
                 samples: Iterable[Iterable[str]] = (),
                 caps_words: bool = False):
        """
        Parameters
        ----------

        name
            Unique identifier, e.g. ``wikipedia`` or ``gost_779``
        mapping
            Base mapping from single (lowercase) Cyrillic characters to
            Latin strings
        prev_mapping
            Overrides keyed by the preceding character and the current one,
            e.g. ``{'ье': 'ye'}``. A key of just the current character
            applies at the start of a word.
        next_mapping
            Overrides keyed by the current character and the following one.
            A key of just the current character applies at the end of a
            word.
        ending_mapping
            Word-final substitutions, e.g. ``{'ий': 'y'}``
        description, url
            Human-readable metadata
        aliases
            Extra names under which the schema is registered
        samples
            ``(source, expected)`` pairs, see
            :py:func:`~cyrtrans.convenience.check_samples`
        caps_words
            In words written entirely in capitals, uppercase the whole
            replacement of each letter (*ЮЛИЯ* -> *YULIYA*) instead of only
            its first character (*YuLIYa*).
        """
        if not isinstance(name, str) or not name:
            raise SchemaError(f'Schema name must be a non-empty string, not '
                              f'{name!r}')
        base = _lowercase_table(mapping, 'mapping', name)
        prev = _lowercase_table(prev_mapping, 'prev_mapping', name)
        next_ = _lowercase_table(next_mapping, 'next_mapping', name)
        ending = _lowercase_table(ending_mapping, 'ending_mapping', name)
        for key in base:
            if len(key) != 1:
                raise SchemaError(f'{name}: mapping keys must be single '
                                  f'characters, not {key!r}')
        set_ = object.__setattr__
        set_(self, 'name', name)
        set_(self, 'description', description)
        set_(self, 'url', url)
        if isinstance(aliases, str):
            aliases = (aliases,)
        set_(self, 'aliases', tuple(aliases))
        set_(self, 'caps_words', bool(caps_words))
        try:
            set_(self, 'samples', tuple((source, expected)
                                        for source, expected in samples))
        except (TypeError, ValueError) as e:
            raise SchemaError(f'{name}: samples must be [source, expected] '
                              f'pairs') from e
        set_(self, '_base', BaseRule(base))
        set_(self, '_prev', ContextRule(_context_table(prev, PREV,
                                                       'prev_mapping', name),
                                        PREV))
        set_(self, '_next', ContextRule(_context_table(next_, NEXT,
                                                       'next_mapping', name),
                                        NEXT))
        set_(self, '_ending', EndingRule(ending))
        # order of precedence for single letters
        set_(self, 'letter_rules', (self._next, self._prev, self._base))
        self.validate()

    def __setattr__(self, name, value):
        raise AttributeError('Schema is immutable')

    def __delattr__(self, name):
        raise AttributeError('Schema is immutable')

    def __repr__(self):
        return f'Schema({self.name})'

    def __str__(self):
        return self.name

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Schema':
        """Build a Schema from the contents of a schema file. Missing or
        ``null`` tables are treated as empty.
        """
        if not isinstance(data, Mapping):
            raise SchemaError(f'Schema data must be a mapping, not '
                              f'{type(data).__name__}')
        unknown = set(data) - set(SCHEMA_KEYS)
        if unknown:
            warn(f'Schema {data.get("name")!r}: ignoring unknown keys '
                 f'{sorted(unknown)}', stacklevel=2)
        return cls(data.get('name'),
                   data.get('mapping') or {},
                   prev_mapping=data.get('prev_mapping'),
                   next_mapping=data.get('next_mapping'),
                   ending_mapping=data.get('ending_mapping'),
                   description=data.get('description') or '',
                   url=data.get('url') or '',
                   aliases=data.get('aliases') or (),
                   samples=data.get('samples') or (),
                   caps_words=data.get('caps_words', False))

    @classmethod
    def from_json(cls, path: Union[str, os.PathLike, Any]) -> 'Schema':
        """Load a Schema from a JSON file. ``path`` may be anything with a
        ``read_text`` method (e.g. an :py:mod:`importlib.resources` path).
        """
        if not hasattr(path, 'read_text'):
            path = Path(path)
        return cls.from_dict(json.loads(path.read_text(encoding='utf-8')))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to :py:obj:`dict` in schema-file layout."""
        return {'name': self.name,
                'description': self.description,
                'url': self.url,
                'aliases': list(self.aliases),
                'caps_words': self.caps_words,
                'mapping': dict(self._base.table),
                'prev_mapping': _context_strings(self._prev),
                'next_mapping': _context_strings(self._next),
                'ending_mapping': dict(self._ending.table),
                'samples': [list(pair) for pair in self.samples]}

    def to_json(self) -> str:
        """Convert to JSON str."""
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2)

    @property
    def mapping(self) -> Mapping[str, str]:
        return self._base.table

    @property
    def prev_mapping(self) -> Mapping[Tuple[Optional[str], str], str]:
        return self._prev.table

    @property
    def next_mapping(self) -> Mapping[Tuple[str, Optional[str]], str]:
        return self._next.table

    @property
    def ending_mapping(self) -> Mapping[str, str]:
        return self._ending.table

    @property
    def ending_rule(self) -> EndingRule:
        return self._ending

    def validate(self):
        """Check that every letter used by a rule has a base mapping.

        Raises :py:class:`UnmappedCharacterError` otherwise. This runs once,
        on construction, so that transliteration itself never meets an
        unmapped letter of the schema's own alphabet.
        """
        alphabet = set(self._base.table)
        for rule, table_name in ((self._prev, 'prev_mapping'),
                                 (self._next, 'next_mapping'),
                                 (self._ending, 'ending_mapping')):
            missing = rule.letters() - alphabet
            if missing:
                raise UnmappedCharacterError(f'{self.name}: {table_name} uses '
                                             f'{sorted(missing)}, which are '
                                             'not in mapping')
        for alias in self.aliases:
            if not isinstance(alias, str) or not alias:
                raise SchemaError(f'{self.name}: invalid alias {alias!r}')

    def is_mapped(self, char: str) -> bool:
        """Whether ``char`` (in either case) is in this schema's alphabet."""
        return char.lower() in self._base.table

    def lookup_base(self, char: str) -> str:
        """Default replacement for ``char``, ignoring case."""
        try:
            return self._base.table[char.lower()]
        except KeyError:
            raise UnmappedCharacterError(f'{char!r} is not in the alphabet of '
                                         f'schema {self.name!r}') from None

    def lookup_context(self, prev: Optional[str], cur: str,
                       next_: Optional[str]) -> Optional[str]:
        """Context-dependent replacement for ``cur``, or ``None``. Next-context
        rules take precedence over prev-context rules. ``None`` neighbors
        stand for word boundaries.
        """
        for rule in (self._next, self._prev):
            replacement = rule.lookup(prev, cur, next_)
            if replacement is not None:
                return replacement
        return None

    def lookup_ending(self, word: str) -> Optional[Tuple[int, str]]:
        """Return ``(start, replacement)`` for the longest ending rule that
        matches the end of ``word``, or ``None``.
        """
        return self._ending.match(word)
