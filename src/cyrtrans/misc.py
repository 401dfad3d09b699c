"""Constants and small helpers shared by the rest of cyrtrans"""

from collections import Counter
from importlib.resources import files
import re
import sys
from typing import Optional
from typing import TextIO
import unicodedata

# This module should not import anything from cyrtrans. Modules that need to
# import from cyrtrans should either be in convenience.py or further up.

__all__ = ['SCHEMA_DIR_VAR', 'MIN_ENDING_WORD_LEN', 'is_caps', 'transfer_case',
           'unmapped_chars', 'report_unmapped']

SCHEMA_DIR_VAR = 'CYRTRANS_SCHEMA_DIR'  # extra directory of *.json schemas
RSRC_DIR = files('cyrtrans') / 'resources'

# ending rules never fire on words shorter than this
MIN_ENDING_WORD_LEN = 3

WORD_RE = re.compile(r'(\w+)')


def is_caps(word: str) -> bool:
    """Whether ``word`` is written entirely in capitals. A single capital
    letter (e.g. *Я*) does not count, since it is indistinguishable from an
    ordinary capitalized word.
    """
    return word.isupper() and sum(char.isalpha() for char in word) > 1


def transfer_case(replacement: str, source: str, whole: bool = False) -> str:
    """Give ``replacement`` the case of ``source``.

    Parameters
    ----------

    replacement
        Latin replacement, as stored (lowercase) in the schema
    source
        The Cyrillic character(s) being replaced
    whole
        Uppercase all of ``replacement`` rather than only its first
        character. Ignored when ``source`` does not begin with a capital.
    """
    if not source[:1].isupper():
        return replacement
    if whole:
        return replacement.upper()
    return replacement[:1].upper() + replacement[1:]


def _is_cyrillic(char: str) -> bool:
    return unicodedata.name(char, '').startswith('CYRILLIC')


def unmapped_chars(text: str, schema) -> Counter:
    """Count the Cyrillic characters in ``text`` that ``schema`` has no
    mapping for (and would therefore pass through untouched).
    """
    return Counter(char for char in text
                   if _is_cyrillic(char) and not schema.is_mapped(char))


def report_unmapped(text: str, schema,
                    file: Optional[TextIO] = None) -> Counter:
    """Print a table of unmapped Cyrillic characters to ``file`` (default:
    stderr). Nothing is printed if every Cyrillic character is covered.
    """
    file = sys.stderr if file is None else file
    counts = unmapped_chars(text, schema)
    if not counts:
        return counts
    print(f'Characters not covered by schema {schema.name!r}:', file=file)
    print('DISP', 'REPR', 'HEX', 'NAME', 'COUNT', sep='\t', file=file)
    for char, count in sorted(counts.items()):
        print(char, repr(char), f'{ord(char):04x}',
              unicodedata.name(char, 'MISSING'), count, sep='\t', file=file)
    return counts
