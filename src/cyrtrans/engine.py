"""Apply a Schema to running text"""

from typing import List
from typing import Optional

from .misc import is_caps
from .misc import transfer_case
from .misc import WORD_RE
from .schema import Schema


__all__ = ['transliterate', 'transliterate_word']


def transliterate(schema: Schema, text: str, *,
                  caps_words: Optional[bool] = None) -> str:
    """Transliterate ``text`` using ``schema``.

    Words are maximal runs of word characters; everything between them
    (whitespace, punctuation, hyphens) is copied verbatim, as is any
    character outside the schema's alphabet.

    Parameters
    ----------

    schema
        The :py:class:`~cyrtrans.schema.Schema` to apply
    text
        Input text
    caps_words
        Override :py:attr:`Schema.caps_words` for this call

    >>> from cyrtrans import get_schema
    >>> transliterate(get_schema('wikipedia'), 'Юлия, съешь ещё')
    'Yuliya, syesh yeshchyo'
    """
    if caps_words is None:
        caps_words = schema.caps_words
    # odd indices hold words, even indices the separators between them
    pieces = WORD_RE.split(text)
    return ''.join(transliterate_word(schema, piece, caps_words=caps_words)
                   if i % 2 else piece
                   for i, piece in enumerate(pieces))


def transliterate_word(schema: Schema, word: str,
                       caps_words: bool = False) -> str:
    """Transliterate a single word (no separators).

    The ending, if any, is resolved first and consumes the end of the word.
    Every other position is resolved by the schema's letter rules, looking
    at the original neighbors of the character within the word.
    """
    ending = schema.lookup_ending(word)
    stop = len(word) if ending is None else ending[0]
    whole = caps_words and is_caps(word)
    out: List[str] = []
    for i in range(stop):
        cur = word[i]
        prev = word[i - 1] if i else None
        next_ = word[i + 1] if i + 1 < len(word) else None
        for rule in schema.letter_rules:
            replacement = rule.lookup(prev, cur, next_)
            if replacement is not None:
                out.append(transfer_case(replacement, cur, whole=whole))
                break
        else:
            out.append(cur)
    if ending is not None:
        start, replacement = ending
        span = word[start:]
        out.append(transfer_case(replacement, span, whole=span.isupper()))
    return ''.join(out)
