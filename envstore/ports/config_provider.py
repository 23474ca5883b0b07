"""ConfigProvider Port Interface.

Contract: read-only typed lookup by canonical key or derived alias. The envdemo
renderers are written against this port; ``EnvironmentStore`` implements it.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from envstore.types.types import CanonicalKey, DerivedAlias, TypedValue


@runtime_checkable
class ConfigProvider(Protocol):
    """
    Absent keys return None; lookups never raise, so callers can check optional
    settings freely.
    """

    def get(self, key: CanonicalKey) -> TypedValue | None: ...

    def get_derived(self, name: DerivedAlias) -> TypedValue | None: ...
