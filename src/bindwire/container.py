from __future__ import annotations

import logging
from contextlib import ExitStack
from types import TracebackType
from typing import TYPE_CHECKING, Any, TypeVar, overload

from bindwire.bindings import Binding, BindingBuilder
from bindwire.defaults import DEFAULT_STRICT
from bindwire.dependencies import InjectionPointsExtractor
from bindwire.exceptions import BindwireContainerDisposedError
from bindwire.host import HostObjectFactory
from bindwire.resolution import Resolver

if TYPE_CHECKING:
    from typing_extensions import Self

T = TypeVar("T")

logger = logging.getLogger(__name__)

_DISPOSE_METHOD_NAMES = ("dispose", "close")


class Container:
    """Hold bindings and build, wire, cache and dispose the objects they describe.

    Bindings are kept in registration order. Several bindings may share a
    target type; they are told apart by ``with_id`` (matched against parameter
    names) and ``when_injected_into`` (matched against the consumer type).

    Objects are built through their ``@inject``-marked constructor, falling
    back to calling the class without arguments, and are then member-injected
    through their ``@inject``-marked methods. Parameters are resolved from this
    container's bindings, the ad hoc arguments of the call, the parent
    container chain, and finally defaults.

    The container registers itself as a singleton binding, so any object may
    ask for it.

    Examples:
        .. code-block:: python

            container = Container()
            container.bind(Paths).from_instance(Paths(repo_path, project_path))
            container.bind(Prefs).to(EditorPrefs)
            container.bind(GitManager).non_lazy()
            container.create_eager_instances()

            manager = container.get_instance(GitManager)

    """

    def __init__(
        self,
        parent: Container | None = None,
        *,
        host_object_factory: HostObjectFactory | None = None,
        strict: bool = DEFAULT_STRICT,
    ) -> None:
        """Initialize an empty container bound to itself.

        Args:
            parent: Container consulted when a parameter cannot be resolved
                locally.
            host_object_factory: Factory for types that cannot be built by
                calling the class. Child containers without one use their
                parent's.
            strict: Raise on ambiguous bindings and failing injectable methods
                instead of logging them.

        """
        self._bindings: list[Binding] = []
        self._parent = parent
        self._host_object_factory = host_object_factory
        self._strict = strict
        self._disposed = False
        self._resolver = Resolver(self, InjectionPointsExtractor())
        self._self_bindings = [self.bind(Container).from_instance(self).binding]
        if type(self) is not Container:
            self._self_bindings.append(self.bind(type(self)).from_instance(self).binding)

    @property
    def parent(self) -> Container | None:
        """Container consulted after local resolution fails."""
        return self._parent

    @property
    def strict(self) -> bool:
        return self._strict

    @property
    def host_object_factory(self) -> HostObjectFactory | None:
        """Host object factory of this container or, failing that, of its nearest parent."""
        if self._host_object_factory is not None or self._parent is None:
            return self._host_object_factory
        return self._parent.host_object_factory

    @property
    def resolver(self) -> Resolver:
        return self._resolver

    @property
    def bindings(self) -> tuple[Binding, ...]:
        """Registered bindings, in registration order."""
        return tuple(self._bindings)

    def set_parent(self, parent: Container | None) -> None:
        """Attach the container consulted after local resolution fails.

        A parent and child must not be chained into a loop.
        """
        self._ensure_not_disposed()
        self._parent = parent

    def bind(self, target: type[T]) -> BindingBuilder[T]:
        """Register a new binding for ``target`` and return its builder.

        Args:
            target: Type consumers ask for.

        Returns:
            A builder used to choose the implementation, factory, instance,
            restrictions and lifetime of the binding.

        Examples:
            .. code-block:: python

                container.bind(ExternalAdapter).to(GitExtensionsAdapter)
                container.bind(ExternalAdapter).to(TortoiseGitAdapter)
                container.bind(Overlay).non_lazy()

        """
        self._ensure_not_disposed()
        binding = Binding(target=target)
        self._bindings.append(binding)
        return BindingBuilder(binding)

    def unbind(self, target: type[Any]) -> None:
        """Remove every binding whose target or implementation is ``target``."""
        self._ensure_not_disposed()
        self._bindings = [
            binding
            for binding in self._bindings
            if binding.target != target and binding.implementation != target
        ]

    def clear(self) -> None:
        """Remove every binding, including the container's own, without disposing instances."""
        self._ensure_not_disposed()
        self._bindings.clear()

    @overload
    def get_instance(self, target: type[T], id: str | None = None) -> T | None: ...  # noqa: A002

    @overload
    def get_instance(self, target: Any, id: str | None = None) -> Any: ...  # noqa: A002

    def get_instance(self, target: Any, id: str | None = None) -> Any:  # noqa: A002
        """Return the instance of the first unrestricted binding of ``target``.

        Only bindings without a consumer restriction are considered. Without
        ``id`` the binding must have no id either; with ``id`` its id must be
        equal. The parent container is not consulted.

        Args:
            target: Bound type to look up.
            id: Disambiguation id of the binding.

        Returns:
            The instance, or ``None`` when no binding matches.

        """
        self._ensure_not_disposed()
        for binding in self._bindings:
            if binding.target != target or binding.when_injected_into is not None:
                continue
            if (binding.id or None) == id:
                return self._resolver.provide(binding)
        return None

    def get_instances(self, target: type[T]) -> list[T]:
        """Return instances of every unrestricted binding of ``target``, in registration order."""
        self._ensure_not_disposed()
        return [
            self._resolver.provide(binding)
            for binding in list(self._bindings)
            if binding.target == target and binding.is_unrestricted
        ]

    def create_eager_instances(self) -> None:
        """Build the instance of every ``non_lazy()`` binding, in registration order.

        Call it once, after all bindings are registered. Later eager bindings
        may depend on earlier ones.
        """
        self._ensure_not_disposed()
        for binding in list(self._bindings):
            if binding.is_non_lazy and not binding.has_instance:
                logger.debug("Creating eager instance of %r", binding.implementation)
                self._resolver.provide(binding)

    def create_instance(self, cls: type[T], *arguments: Any) -> T:
        """Build a new, uncached instance of ``cls``.

        Bindings of ``cls`` itself are ignored; its parameters are resolved
        normally, with ``arguments`` consulted after the container's bindings.

        Args:
            cls: Class to build.
            *arguments: Ad hoc arguments, plain values matched by type or
                ``InjectionArgument`` objects matched by parameter name.

        Raises:
            BindwireUnresolvedParameterError: If a mandatory parameter has no
                source.
            BindwireCycleDetectedError: If a dependency requires its consumer
                back through its constructor.

        """
        self._ensure_not_disposed()
        return self._resolver.construct(cls, arguments)

    def inject(self, instance: Any) -> None:
        """Run member injection on an object built elsewhere."""
        self._ensure_not_disposed()
        self._resolver.inject_members(instance)

    def inject_static(self, cls: type[Any]) -> None:
        """Run injectable ``staticmethod``/``classmethod`` members of ``cls``."""
        self._ensure_not_disposed()
        self._resolver.inject_static(cls)

    def dispose(self) -> None:
        """Dispose cached singletons and drop every binding.

        Each distinct cached instance gets its ``dispose()`` (or, failing that,
        ``close()``) method called exactly once, in reverse registration
        order. Transient instances belong to their callers and are left alone.
        When a hook raises, the remaining hooks still run before the error
        propagates. Disposing twice is a no-op.
        """
        if self._disposed:
            return
        self._disposed = True

        bindings = [binding for binding in self._bindings if binding not in self._self_bindings]
        self._bindings.clear()

        disposed_ids: set[int] = set()
        with ExitStack() as stack:
            for binding in bindings:
                instance = binding.release()
                if instance is None or instance is self or id(instance) in disposed_ids:
                    continue
                hook = self._dispose_hook(instance)
                if hook is not None:
                    disposed_ids.add(id(instance))
                    stack.callback(hook)
            logger.debug("Disposing %d cached instances", len(disposed_ids))

    def _dispose_hook(self, instance: Any) -> Any:
        for name in _DISPOSE_METHOD_NAMES:
            hook = getattr(instance, name, None)
            if callable(hook):
                return hook
        return None

    def _ensure_not_disposed(self) -> None:
        if self._disposed:
            raise BindwireContainerDisposedError

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.dispose()
