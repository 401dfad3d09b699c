from typing import List
from typing import Tuple
from typing import Union

from .engine import transliterate
from .schema import Schema
from .schemas import get_schema


__all__ = ['parse_by_schema_name', 'schema_info', 'check_samples']


def parse_by_schema_name(text: str, schema_name: str) -> str:
    """Transliterate ``text`` with the registered schema ``schema_name``.

    Raises :py:class:`~cyrtrans.schemas.UnknownSchemaError` if no such
    schema is registered.

    >>> parse_by_schema_name('Юлия', 'wikipedia')
    'Yuliya'
    """
    return transliterate(get_schema(schema_name), text)


def schema_info(schema_name: str) -> str:
    schema = get_schema(schema_name)
    info = f'{schema.name}: {schema.description}'
    if schema.url:
        info += f' <{schema.url}>'
    return info


def check_samples(schema: Union[Schema, str]) -> List[Tuple[str, str, str]]:
    """Transliterate the samples bundled with ``schema`` and return those
    that come out wrong, as ``(source, expected, actual)`` triples.
    """
    if isinstance(schema, str):
        schema = get_schema(schema)
    mismatches = []
    for source, expected in schema.samples:
        actual = transliterate(schema, source)
        if actual != expected:
            mismatches.append((source, expected, actual))
    return mismatches
