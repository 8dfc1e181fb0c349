from collections.abc import Collection, MutableSequence, Sequence
from typing import Any

from bindwire.lifetime import Lifetime

DEFAULT_LIFETIME = Lifetime.LAZY_SINGLETON
"""Lifetime of bindings that never call ``non_lazy()`` or ``as_transient()``."""

DEFAULT_STRICT = False
"""Whether ambiguous bindings and failing injectable methods raise instead of logging."""

ZERO_VALUE_TYPES: tuple[type[Any], ...] = (
    bool,
    int,
    float,
    complex,
    str,
    bytes,
)
"""Types whose ``T()`` value is used for ``Maybe[T]`` parameters without a default."""

COLLECTION_ORIGINS: tuple[Any, ...] = (
    list,
    Sequence,
    MutableSequence,
    Collection,
)
"""Generic origins that resolve to every matching binding instead of exactly one."""
