"""
Purpose:
    - Own the key -> TypedValue mapping built from tokenizer output
    - Exact lookup (case-sensitive) and derived lowerCamelCase lookup
    - Two states: Unbuilt (only ``build``) and Built (read-only)

Duplicate keys: last occurrence wins, and the key takes the position of that last
occurrence. Derived lookup computes aliases lazily over the same mapping, there is
no second index.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional

from envstore.core.inference import infer
from envstore.core.naming import derived_name
from envstore.errors.errors import StoreStateError
from envstore.types.types import CanonicalKey, DerivedAlias, RawPair, TypedValue

_LOGGER = logging.getLogger(__name__)


class EnvironmentStore:
    """
    Immutable, queryable result of parsing one .env document.

    Each instance is built exactly once and never changes afterwards, so a built
    store can be handed to other components (or threads) without copying.
    """

    def __init__(self, *, extended_types: bool = False) -> None:
        self._extended_types = extended_types
        self._values: Optional[Mapping[CanonicalKey, TypedValue]] = None

    # --- lifecycle ------------------------------------------

    @property
    def is_built(self) -> bool:
        return self._values is not None

    def build(self, pairs: Iterable[RawPair]) -> EnvironmentStore:
        """
        Classify and insert ``pairs`` in order. Returns ``self`` so that
        ``EnvironmentStore().build(pairs)`` reads as one expression.
        """
        if self._values is not None:
            raise StoreStateError("EnvironmentStore is already built")

        values: dict[CanonicalKey, TypedValue] = {}
        for pair in pairs:
            if pair.key in values:
                _LOGGER.debug(
                    "dotenv_key_overwritten",
                    extra={
                        "event": "dotenv_key_overwritten",
                        "key": pair.key,
                        "line_number": pair.line_number,
                    },
                )
                del values[pair.key]
            values[pair.key] = infer(pair.value, extended_types=self._extended_types)

        self._values = MappingProxyType(values)
        _LOGGER.debug(
            "dotenv_store_built",
            extra={"event": "dotenv_store_built", "keys_total": len(values)},
        )
        return self

    # --- lookup ---------------------------------------------

    def get(self, key: CanonicalKey) -> TypedValue | None:
        return self._built().get(key)

    def get_derived(self, name: DerivedAlias) -> TypedValue | None:
        """
        Resolve a lowerCamelCase alias (``imapHost``) to its canonical entry
        (``IMAP_HOST``). Returns None if no canonical key derives to ``name``.
        """
        key = self.canonical_key(name)
        return None if key is None else self._built()[key]

    def canonical_key(self, name: DerivedAlias) -> CanonicalKey | None:
        if not name:
            return None
        # reversed: when two keys share an alias the later one wins
        for key in reversed(list(self._built())):
            if derived_name(key) == name:
                return key
        return None

    # --- mapping helpers ------------------------------------

    def keys(self) -> list[CanonicalKey]:
        return list(self._built())

    def items(self) -> list[tuple[CanonicalKey, TypedValue]]:
        return list(self._built().items())

    def as_dict(self) -> dict[CanonicalKey, str]:
        """Plain ``{key: string_value}`` snapshot."""
        return {key: value.string_value() for key, value in self._built().items()}

    def __getitem__(self, key: CanonicalKey) -> TypedValue:
        return self._built()[key]

    def __contains__(self, key: object) -> bool:
        return key in self._built()

    def __iter__(self) -> Iterator[CanonicalKey]:
        return iter(self._built())

    def __len__(self) -> int:
        return len(self._built())

    def __repr__(self) -> str:
        if self._values is None:
            return "EnvironmentStore(<unbuilt>)"
        return f"EnvironmentStore(keys={list(self._values)!r})"

    def _built(self) -> Mapping[CanonicalKey, TypedValue]:
        if self._values is None:
            raise StoreStateError("EnvironmentStore is not built yet")
        return self._values


def build(pairs: Iterable[RawPair], *, extended_types: bool = False) -> EnvironmentStore:
    """Build a fresh store from ``pairs``."""
    return EnvironmentStore(extended_types=extended_types).build(pairs)
