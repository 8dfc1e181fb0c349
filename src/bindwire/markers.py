from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Annotated, Any, TypeVar, Union, get_args, get_origin

from bindwire.exceptions import BindwireInvalidInjectionTargetError

T = TypeVar("T")
_ANNOTATED_MARKER_MIN_ARGS = 2

INJECT_MARKER_ATTR = "__bindwire_inject__"
"""Attribute set on functions marked with ``@inject``."""

INJECT_CONSTRUCTOR_ATTR = "__bindwire_inject_constructor__"
"""Attribute set on classes marked with ``@inject``; designates their own ``__init__``."""


class MaybeMarker:
    """Marker that indicates a parameter is optional and may fall back to a default."""


if TYPE_CHECKING:
    Maybe = Union[T, None]  # noqa: UP007
    """Mark a parameter as optional.

    At runtime ``Maybe[T]`` becomes ``Annotated[T, MaybeMarker()]``.
    """

else:

    class Maybe:
        """Mark a parameter as optional.

        When nothing else can satisfy a ``Maybe[T]`` parameter, the parameter
        default is used, or the zero value of ``T`` when there is no default
        (``0``, ``False``, ``""`` for builtin scalars and ``None`` otherwise).

        At runtime ``Maybe[T]`` resolves to ``Annotated[T, MaybeMarker()]``.

        Examples:
            .. code-block:: python

                class Overlay:
                    @inject
                    def __init__(self, paths: Paths, cull: Maybe[bool] = True) -> None:
                        ...

        """

        def __class_getitem__(cls, item: T) -> Annotated[T, MaybeMarker]:
            if get_origin(item) is Annotated:
                args = get_args(item)
                inner = args[0]
                metadata = args[1:]
                return build_annotated((inner, *metadata, MaybeMarker()))
            return build_annotated((item, MaybeMarker()))


InjectableT = TypeVar("InjectableT")


def inject(target: InjectableT) -> InjectableT:
    """Mark a constructor, method, or class as an injection target.

    Marking ``__init__`` (or the class itself, which is handy for dataclasses)
    makes the container build the class by resolving every constructor
    parameter. Marking instance methods makes ``Container.inject`` call them on
    existing objects, base classes first. Marking ``staticmethod`` or
    ``classmethod`` members makes them visible to ``Container.inject_static``.

    Args:
        target: The class or callable to mark.

    Returns:
        The same object, marked.

    Raises:
        BindwireInvalidInjectionTargetError: If ``target`` is not a class,
            function, ``staticmethod`` or ``classmethod``.

    Examples:
        .. code-block:: python

            class GitManager:
                @inject
                def __init__(self, paths: Paths, callbacks: Callbacks) -> None:
                    ...

                @inject
                def construct(self, log: Log) -> None:
                    self.log = log

    """
    if inspect.isclass(target):
        setattr(target, INJECT_CONSTRUCTOR_ATTR, True)
        return target

    function = target.__func__ if isinstance(target, (staticmethod, classmethod)) else target
    if not inspect.isfunction(function):
        raise BindwireInvalidInjectionTargetError(target)
    setattr(function, INJECT_MARKER_ATTR, True)
    return target


def is_injection_target(member: Any) -> bool:
    """Return whether a function or method descriptor was marked with ``@inject``."""
    function = member.__func__ if isinstance(member, (staticmethod, classmethod)) else member
    return getattr(function, INJECT_MARKER_ATTR, False) is True


def is_injectable_class(cls: type[Any]) -> bool:
    """Return whether ``cls`` itself (not a base) was marked with ``@inject``."""
    return cls.__dict__.get(INJECT_CONSTRUCTOR_ATTR, False) is True


def is_maybe_annotation(annotation: Any) -> bool:
    """Return True when annotation is Annotated[..., MaybeMarker()]."""
    if get_origin(annotation) is not Annotated:
        return False
    annotation_args = get_args(annotation)
    if len(annotation_args) < _ANNOTATED_MARKER_MIN_ARGS:
        return False
    metadata = annotation_args[1:]
    return any(isinstance(item, MaybeMarker) for item in metadata)


def strip_annotated(annotation: Any) -> Any:
    """Recursively unwrap Annotated[T, ...] into T."""
    if get_origin(annotation) is not Annotated:
        return annotation
    return strip_annotated(get_args(annotation)[0])


def build_annotated(params: tuple[object, ...]) -> Any:
    """Return Annotated[...] with a pre-built params tuple (Py 3.10+ compatible)."""
    try:
        return Annotated.__class_getitem__(params)  # type: ignore[attr-defined]
    except AttributeError:
        return Annotated.__getitem__(params)  # type: ignore[attr-defined]

