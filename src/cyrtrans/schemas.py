"""Process-wide registry of known schemas"""

import os
from pathlib import Path
from types import MappingProxyType
from typing import Dict
from typing import List
from typing import Mapping
from warnings import warn

from .misc import RSRC_DIR
from .misc import SCHEMA_DIR_VAR
from .schema import Schema


__all__ = ['UnknownSchemaError', 'get_registry', 'get_schema', 'schema_names']

_registry = None


class UnknownSchemaError(LookupError):
    """No schema is registered under the requested name."""

    def __init__(self, name: str):
        super().__init__(f'There is no schema with name {name!r}')
        self.name = name


def _load_dir(directory) -> Dict[str, Schema]:
    """Load every ``*.json`` file in ``directory``, keyed by lowercase
    schema name.
    """
    schemas: Dict[str, Schema] = {}
    for path in sorted(directory.iterdir(), key=lambda p: p.name):
        if not path.name.endswith('.json'):
            continue
        schema = Schema.from_json(path)
        key = schema.name.lower()
        if key in schemas:
            warn(f'{path}: duplicate schema name {schema.name!r}; the file '
                 'loaded last wins', stacklevel=3)
        schemas[key] = schema
    return schemas


def _build_registry() -> Mapping[str, Schema]:
    schemas = _load_dir(RSRC_DIR)
    user_dir = os.getenv(SCHEMA_DIR_VAR)
    if user_dir:
        for key, schema in _load_dir(Path(user_dir)).items():
            if key in schemas:
                warn(f'Schema {schema.name!r} from {user_dir} replaces the '
                     'bundled schema of the same name', stacklevel=3)
            schemas[key] = schema
    index = dict(schemas)
    for schema in schemas.values():
        for alias in schema.aliases:
            alias = alias.lower()
            if alias in index and index[alias] is not schema:
                warn(f'Alias {alias!r} of schema {schema.name!r} is already '
                     f'taken by {index[alias].name!r}; ignoring it',
                     stacklevel=3)
                continue
            index[alias] = schema
    return MappingProxyType(index)


def get_registry() -> Mapping[str, Schema]:
    """Read-only map of lowercase names and aliases to schemas.

    Built from the bundled schema files (plus any in the directory named by
    the ``CYRTRANS_SCHEMA_DIR`` environment variable) on first use, and
    never modified afterwards.
    """
    global _registry
    if _registry is None:
        _registry = _build_registry()
    return _registry


def get_schema(name: str) -> Schema:
    """Look up a schema by name or alias, ignoring case.

    >>> get_schema('ICAO_doc_9303')
    Schema(icao_doc_9303)
    """
    try:
        return get_registry()[name.lower()]
    except (KeyError, AttributeError):
        raise UnknownSchemaError(name) from None


def schema_names() -> List[str]:
    """Sorted canonical names of all registered schemas (no aliases)."""
    return sorted({schema.name for schema in get_registry().values()})
