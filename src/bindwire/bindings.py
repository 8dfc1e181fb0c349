from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from bindwire.context import CreationContext
from bindwire.defaults import DEFAULT_LIFETIME
from bindwire.exceptions import (
    BindwireIncompatibleImplementationError,
    BindwireIncompatibleInstanceError,
)
from bindwire.lifetime import Lifetime
from bindwire.type_checks import is_assignable, is_instance_of

if TYPE_CHECKING:
    from typing_extensions import Self

T = TypeVar("T")

BindingFactory = Callable[[CreationContext], Any]
"""Factory registered with ``from_method``; receives the creation context."""

_NOT_CACHED: Any = object()


@dataclass(kw_only=True, eq=False)
class Binding:
    """A registered rule mapping a requested type to a way of producing an instance."""

    target: Any
    """The type consumers ask for."""
    implementation: Any = None
    """Concrete type to construct; defaults to ``target``."""
    factory: BindingFactory | None = None
    """Optional factory that replaces default construction."""
    arguments: tuple[Any, ...] = ()
    """Ad hoc arguments consulted while constructing this binding's instance."""
    id: str | None = None
    """Disambiguation id, matched against the parameter name."""
    when_injected_into: Any = None
    """If set, the binding only satisfies parameters of this exact consumer type."""
    lifetime: Lifetime = DEFAULT_LIFETIME

    constructor_signature: tuple[tuple[str, Any], ...] | None = field(default=None, repr=False)
    """Memoized ``(name, type)`` pairs of the implementation's injectable constructor."""

    _instance: Any = field(default=_NOT_CACHED, repr=False)

    def __post_init__(self) -> None:
        if self.implementation is None:
            self.implementation = self.target

    @property
    def instance(self) -> Any:
        """The cached instance, or ``None`` when nothing is cached."""
        if self._instance is _NOT_CACHED:
            return None
        return self._instance

    @property
    def has_instance(self) -> bool:
        return self._instance is not _NOT_CACHED

    @property
    def is_non_lazy(self) -> bool:
        return self.lifetime is Lifetime.EAGER_SINGLETON

    @property
    def is_transient(self) -> bool:
        return self.lifetime is Lifetime.TRANSIENT

    @property
    def is_unrestricted(self) -> bool:
        """True when the binding has neither an id nor a consumer restriction."""
        return not self.id and self.when_injected_into is None

    def cache(self, instance: Any) -> None:
        """Store the instance shared by every resolution of a singleton binding."""
        self._instance = instance

    def release(self) -> Any:
        """Forget the cached instance and arguments, returning the instance."""
        instance = self.instance
        self._instance = _NOT_CACHED
        self.arguments = ()
        return instance

    def matches(self, dependency: Any, *, parameter_name: str | None, consumer: Any) -> bool:
        """Return whether this binding can satisfy a parameter.

        Args:
            dependency: Parameter type; must equal ``target`` exactly.
            parameter_name: Name compared with ``id`` when the binding has one.
            consumer: Type being injected into, compared with ``when_injected_into``.

        """
        if self.target != dependency:
            return False
        if self.when_injected_into is not None and self.when_injected_into is not consumer:
            return False
        return not self.id or parameter_name == self.id


class BindingBuilder(Generic[T]):
    """Fluent configuration of a freshly registered binding.

    Returned by ``Container.bind``; every method mutates the binding and
    returns the builder so calls can be chained. Incompatible types are
    rejected immediately.

    Examples:
        .. code-block:: python

            container.bind(Prefs).to(EditorPrefs)
            container.bind(GitManager).non_lazy()
            container.bind(ToolbarRenderer).as_transient()
            container.bind(Paths).from_instance(Paths(repo_path, project_path))
            container.bind(Logger).from_method(lambda ctx: Logger(ctx.container.get_instance(Log)))

    """

    def __init__(self, binding: Binding) -> None:
        self._binding = binding

    @property
    def binding(self) -> Binding:
        """The binding being configured."""
        return self._binding

    def to(self, implementation: type[Any]) -> Self:
        """Construct ``implementation`` instead of the target type.

        Raises:
            BindwireIncompatibleImplementationError: If ``implementation`` is
                not the target type or one of its subclasses.

        """
        if not is_assignable(implementation, self._binding.target):
            raise BindwireIncompatibleImplementationError(self._binding.target, implementation)
        self._binding.implementation = implementation
        return self

    def when_injected_into(self, consumer: type[Any]) -> Self:
        """Only satisfy parameters of ``consumer``'s constructor and injectable methods."""
        self._binding.when_injected_into = consumer
        return self

    def from_instance(self, instance: T) -> Self:
        """Use a pre-built instance; it is shared by every resolution.

        Raises:
            BindwireIncompatibleInstanceError: If ``instance`` is ``None`` or
                not an instance of the target type.

        """
        if instance is None or not is_instance_of(instance, self._binding.target):
            raise BindwireIncompatibleInstanceError(self._binding.target, instance)
        self._binding.cache(instance)
        return self

    def from_method(self, factory: Callable[[CreationContext], T]) -> Self:
        """Build instances by calling ``factory`` with a ``CreationContext``.

        The returned object still goes through member injection.
        """
        self._binding.factory = factory
        return self

    def with_id(self, id: str) -> Self:  # noqa: A002
        """Only satisfy parameters named ``id``."""
        self._binding.id = id
        return self

    def non_lazy(self) -> Self:
        """Build the instance in ``Container.create_eager_instances()``."""
        self._binding.lifetime = Lifetime.EAGER_SINGLETON
        return self

    def as_transient(self) -> Self:
        """Build a new instance on every resolution."""
        self._binding.lifetime = Lifetime.TRANSIENT
        return self

    def with_arguments(self, *arguments: Any) -> Self:
        """Store ad hoc arguments used while constructing this binding's instance.

        Arguments may be plain values, matched by type, or ``InjectionArgument``
        objects, matched by parameter name.
        """
        self._binding.arguments = arguments
        return self
