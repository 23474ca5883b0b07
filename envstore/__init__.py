"""
envstore: typed .env file loading.

Reads a ``.env`` file, splits it into KEY=VALUE pairs and stores each value with an
inferred type. Values can be looked up by their canonical key or by a derived
lowerCamelCase alias.

Components:
- tokenize: text -> RawPair list (blank lines and # comments skipped)
- EnvironmentStore / build: immutable key -> TypedValue mapping, last-wins
- DotenvLoader: resolve path, read file, tokenize, build
- derived_name: IMAP_HOST -> imapHost

Usage:
    from envstore import DotenvLoader

    store = DotenvLoader().load()          # $PWD/.env
    store.get("IMAP_PORT")                 # TypedValue(kind=INTEGER, value=993)
    store.get_derived("imapHost").string_value()
"""

from envstore.config.configs import LoaderConfig
from envstore.core.loader import DotenvLoader
from envstore.core.naming import derived_name
from envstore.core.store import EnvironmentStore, build
from envstore.core.tokenizer import tokenize
from envstore.errors.errors import (
    EmptyPair,
    EnvstoreError,
    FileMissing,
    MalformedLine,
    ParseError,
    SourceError,
    StoreStateError,
    UnreadableFile,
)
from envstore.types.types import RawPair, TypedValue, ValueKind

__all__ = [
    # Entry points
    "DotenvLoader",
    "LoaderConfig",
    "tokenize",
    "build",
    "derived_name",
    # Types
    "EnvironmentStore",
    "RawPair",
    "TypedValue",
    "ValueKind",
    # Errors
    "EnvstoreError",
    "SourceError",
    "FileMissing",
    "UnreadableFile",
    "ParseError",
    "MalformedLine",
    "EmptyPair",
    "StoreStateError",
]
