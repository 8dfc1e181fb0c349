from __future__ import annotations

from typing import Any


def _type_name(value: Any) -> str:
    return getattr(value, "__qualname__", None) or repr(value)


class BindwireError(Exception):
    """Represent a base class for all bindwire-specific failures.

    Catch this type when you want to handle any bindwire error path without
    matching each concrete exception class individually.
    """


class BindwireConfigurationError(BindwireError):
    """Signal an invalid binding or marker configuration.

    Configuration errors are raised eagerly, while bindings are declared, so
    misconfigured wiring fails during startup instead of on first use.
    """


class BindwireIncompatibleImplementationError(BindwireConfigurationError):
    """Signal that ``to()`` received a type that cannot stand in for the target.

    Typical fix is binding the implementation under one of its base classes,
    or making the implementation inherit from the requested type.
    """

    def __init__(self, target: Any, implementation: Any) -> None:
        self.target = target
        self.implementation = implementation
        super().__init__(
            f"Type '{_type_name(implementation)}' must be assignable to '{_type_name(target)}'.",
        )


class BindwireIncompatibleInstanceError(BindwireConfigurationError):
    """Signal that ``from_instance()`` received a value of the wrong type.

    ``None`` is rejected as well, since a preset instance must be a real value.
    """

    def __init__(self, target: Any, instance: Any) -> None:
        self.target = target
        self.instance = instance
        if instance is None:
            msg = f"Preset instance for '{_type_name(target)}' cannot be None."
        else:
            msg = (
                f"Instance of type '{_type_name(type(instance))}' does not match "
                f"binding type '{_type_name(target)}'."
            )
        super().__init__(msg)


class BindwireInvalidInjectionTargetError(BindwireConfigurationError):
    """Signal that ``@inject`` was applied to something that cannot be injected.

    Only classes, functions, ``staticmethod`` and ``classmethod`` objects can
    be marked as injection targets.
    """

    def __init__(self, target: Any) -> None:
        self.target = target
        super().__init__(f"Cannot mark {target!r} as an injection target.")


class BindwireResolutionError(BindwireError):
    """Signal a failure while building or wiring an object."""


class BindwireUnresolvedParameterError(BindwireResolutionError):
    """Signal that a mandatory parameter has no source.

    Raised when no binding, ad hoc argument, parent container, ``Maybe``
    marker, or default value can satisfy the parameter. The whole resolution
    chain is aborted.

    Typical fixes include binding the parameter type, passing it through
    ``create_instance(cls, value)``/``with_arguments(...)``, or marking the
    parameter as ``Maybe[T]``.
    """

    def __init__(self, parameter_name: str, parameter_type: Any, consumer_type: Any) -> None:
        self.parameter_name = parameter_name
        self.parameter_type = parameter_type
        self.consumer_type = consumer_type
        super().__init__(
            f"Unresolved parameter '{parameter_name}' with type '{_type_name(parameter_type)}' "
            f"when injecting into '{_type_name(consumer_type)}'.",
        )


class BindwireCycleDetectedError(BindwireResolutionError):
    """Signal that a dependency requires its own consumer through its constructor.

    The check only inspects the injectable constructor of the dependency being
    resolved, so cycles closed through injectable methods or deeper chains are
    not reported here.
    """

    def __init__(self, consumer_type: Any, dependency_type: Any, parameter_name: str) -> None:
        self.consumer_type = consumer_type
        self.dependency_type = dependency_type
        self.parameter_name = parameter_name
        super().__init__(
            f"Cross references detected when injecting parameter '{parameter_name}' of "
            f"'{_type_name(consumer_type)}' with '{_type_name(dependency_type)}'.",
        )


class BindwireAmbiguousBindingError(BindwireResolutionError):
    """Signal that several bindings satisfy the same parameter.

    Only raised by containers created with ``strict=True``; otherwise the
    ambiguity is logged and the last matching binding wins.
    """

    def __init__(self, parameter_type: Any, candidates: list[Any]) -> None:
        self.parameter_type = parameter_type
        self.candidates = candidates
        super().__init__(
            f"Found {len(candidates)} bindings of type '{_type_name(parameter_type)}'.",
        )


class BindwireMemberInjectionError(BindwireResolutionError):
    """Signal that an injectable method raised while being invoked.

    Only raised by containers created with ``strict=True``; otherwise the
    failure is logged and the remaining injectable methods of that instance
    are skipped.
    """

    def __init__(self, instance_type: Any, method_name: str) -> None:
        self.instance_type = instance_type
        self.method_name = method_name
        super().__init__(
            f"There was a problem while calling injectable method '{method_name}' "
            f"of '{_type_name(instance_type)}'.",
        )


class BindwireContainerDisposedError(BindwireError):
    """Signal use of a container after ``dispose()``.

    A disposed container has released its singletons and dropped its
    bindings; create a new container instead of reusing it.
    """

    def __init__(self) -> None:
        super().__init__("The container has been disposed and cannot be used anymore.")


class BindwireDependencyInferenceError(BindwireConfigurationError):
    """Signal that the type of an injectable parameter cannot be inferred.

    Common triggers are forward references that cannot be evaluated, for
    example annotations naming classes defined inside a function while
    ``from __future__ import annotations`` is active.

    Typical fix is making the annotated types importable at module level.
    """

    def __init__(self, parameter_name: str, owner: Any, error: Exception | None) -> None:
        self.parameter_name = parameter_name
        self.owner = owner
        msg = (
            f"Unable to infer dependency for parameter '{parameter_name}' "
            f"in '{_type_name(owner)}'. Add a resolvable type annotation."
        )
        if error is not None:
            msg = f"{msg} Original annotation error: {error}"
        super().__init__(msg)
