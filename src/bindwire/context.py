from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from bindwire.container import Container


@dataclass(frozen=True, slots=True)
class InjectionArgument:
    """An ad hoc argument tagged with the name of the parameter it is meant for.

    Untagged ad hoc arguments fill the first parameter whose type they match.
    Tag an argument when several parameters share a type, or to reach a
    parameter whose value would otherwise come from a default.

    Examples:
        .. code-block:: python

            container.bind(Overlay).with_arguments(
                InjectionArgument("cull_non_asset_paths", False),
            )

    """

    id: str
    value: Any


@dataclass(frozen=True, slots=True)
class CreationContext:
    """Context passed to factories registered with ``from_method``."""

    container: Container
    """Container that owns the binding being built."""
    arguments: tuple[Any, ...] = ()
    """Ad hoc arguments stored on the binding with ``with_arguments``."""
