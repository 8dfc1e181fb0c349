from __future__ import annotations

from enum import Enum


class Lifetime(Enum):
    """Defines how long a bound instance lives in the container."""

    LAZY_SINGLETON = "lazy_singleton"
    """A single instance is created on first use and shared until the container is disposed."""

    EAGER_SINGLETON = "eager_singleton"
    """Like ``LAZY_SINGLETON``, but built by ``Container.create_eager_instances()``."""

    TRANSIENT = "transient"
    """A new instance is created every time the binding is resolved."""

    @property
    def is_singleton(self) -> bool:
        """Return whether instances of this lifetime are cached."""
        return self is not Lifetime.TRANSIENT
