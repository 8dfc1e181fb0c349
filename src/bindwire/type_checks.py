from __future__ import annotations

import inspect
from typing import Any, get_args, get_origin

from bindwire.defaults import COLLECTION_ORIGINS, ZERO_VALUE_TYPES


def is_runtime_class(candidate: object) -> bool:
    """Return whether candidate is a plain runtime class."""
    return inspect.isclass(candidate) and get_origin(candidate) is None


def is_assignable(source: Any, target: Any) -> bool:
    """Return whether values of ``source`` can be used where ``target`` is expected."""
    if source == target:
        return True
    if not is_runtime_class(source) or not is_runtime_class(target):
        return False
    try:
        return issubclass(source, target)
    except TypeError:
        # non runtime-checkable protocols only match nominal subclasses
        return target in source.__mro__


def is_related(first: Any, second: Any) -> bool:
    """Return whether either type is assignable to the other."""
    return is_assignable(first, second) or is_assignable(second, first)


def is_instance_of(value: Any, annotation: Any) -> bool:
    """Return whether value satisfies annotation, checking generics by their origin."""
    if annotation is Any or annotation is inspect.Parameter.empty:
        return True
    origin = get_origin(annotation)
    if origin is not None and is_runtime_class(origin):
        annotation = origin
    try:
        return isinstance(value, annotation)
    except TypeError:
        return annotation in type(value).__mro__


def collection_element_type(annotation: Any) -> Any | None:
    """Return ``T`` when annotation follows the collection-of-T convention."""
    if get_origin(annotation) not in COLLECTION_ORIGINS:
        return None
    args = get_args(annotation)
    if len(args) != 1:
        return None
    return args[0]


def zero_value(annotation: Any) -> Any:
    """Return the zero value used for optional parameters without a default."""
    if annotation in ZERO_VALUE_TYPES:
        return annotation()
    return None
