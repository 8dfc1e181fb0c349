"""Tests for container registration, lookups and lifetimes."""

import logging

import pytest

from bindwire import Container, inject
from bindwire.exceptions import BindwireContainerDisposedError


class Logger:
    pass


class ConsoleLogger(Logger):
    pass


class Clock:
    pass


class FixedClock(Clock):
    pass


class ExternalAdapter:
    pass


class GitExtensionsAdapter(ExternalAdapter):
    pass


class TortoiseGitAdapter(ExternalAdapter):
    pass


class Service:
    @inject
    def __init__(self, logger: Logger, clock: Clock) -> None:
        self.logger = logger
        self.clock = clock


def test_container_binds_itself(container: Container) -> None:
    assert container.get_instance(Container) is container


def test_subclassed_container_binds_both_types() -> None:
    class EditorContainer(Container):
        pass

    container = EditorContainer()

    assert container.get_instance(Container) is container
    assert container.get_instance(EditorContainer) is container


def test_consumers_can_request_the_container(container: Container) -> None:
    class NeedsContainer:
        @inject
        def __init__(self, container: Container) -> None:
            self.container = container

    assert container.create_instance(NeedsContainer).container is container


def test_get_instance_returns_none_when_unbound(container: Container) -> None:
    assert container.get_instance(Logger) is None


def test_get_instance_returns_bound_implementation(container: Container) -> None:
    container.bind(Logger).to(ConsoleLogger)

    assert isinstance(container.get_instance(Logger), ConsoleLogger)


def test_get_instance_ignores_restricted_bindings(container: Container) -> None:
    container.bind(Logger).when_injected_into(Service)
    container.bind(Logger).to(ConsoleLogger).with_id("console")

    assert container.get_instance(Logger) is None


def test_get_instance_by_id(container: Container) -> None:
    container.bind(Logger)
    container.bind(Logger).to(ConsoleLogger).with_id("console")

    assert isinstance(container.get_instance(Logger, "console"), ConsoleLogger)
    assert type(container.get_instance(Logger)) is Logger
    assert container.get_instance(Logger, "missing") is None


def test_get_instance_returns_first_unnamed_binding(container: Container) -> None:
    container.bind(ExternalAdapter).to(GitExtensionsAdapter)
    container.bind(ExternalAdapter).to(TortoiseGitAdapter)

    assert isinstance(container.get_instance(ExternalAdapter), GitExtensionsAdapter)


def test_singleton_resolves_to_same_instance(container: Container) -> None:
    container.bind(Logger).to(ConsoleLogger)

    assert container.get_instance(Logger) is container.get_instance(Logger)


def test_eager_singleton_resolves_to_same_instance(container: Container) -> None:
    container.bind(Logger).to(ConsoleLogger).non_lazy()
    container.create_eager_instances()

    assert container.get_instance(Logger) is container.get_instance(Logger)


def test_transient_resolves_to_distinct_instances(container: Container) -> None:
    container.bind(Logger).to(ConsoleLogger).as_transient()

    first = container.get_instance(Logger)
    second = container.get_instance(Logger)

    assert first is not second
    assert not container.bindings[-1].has_instance


def test_get_instances_returns_all_in_registration_order(container: Container) -> None:
    container.bind(ExternalAdapter).to(GitExtensionsAdapter)
    container.bind(ExternalAdapter).to(TortoiseGitAdapter)
    container.bind(ExternalAdapter).with_id("named")

    instances = container.get_instances(ExternalAdapter)

    assert [type(instance) for instance in instances] == [
        GitExtensionsAdapter,
        TortoiseGitAdapter,
    ]


def test_get_instances_returns_empty_list_when_unbound(container: Container) -> None:
    assert container.get_instances(ExternalAdapter) == []


def test_create_eager_instances_builds_non_lazy_bindings_only() -> None:
    class Eager:
        created = 0

        def __init__(self) -> None:
            Eager.created += 1

    class Lazy:
        created = 0

        def __init__(self) -> None:
            Lazy.created += 1

    container = Container()
    container.bind(Eager).non_lazy()
    container.bind(Lazy)

    container.create_eager_instances()
    container.create_eager_instances()

    assert Eager.created == 1
    assert Lazy.created == 0
    assert container.bindings[-2].has_instance


def test_later_eager_bindings_may_depend_on_earlier_ones(container: Container) -> None:
    order: list[str] = []

    class Manager:
        def __init__(self) -> None:
            order.append("manager")

    class Watcher:
        @inject
        def __init__(self, manager: Manager) -> None:
            order.append("watcher")
            self.manager = manager

    container.bind(Manager).non_lazy()
    container.bind(Watcher).non_lazy()

    container.create_eager_instances()

    assert order == ["manager", "watcher"]
    assert container.get_instance(Watcher).manager is container.get_instance(Manager)


def test_create_instance_bypasses_bindings_of_outer_type(container: Container) -> None:
    container.bind(Logger).to(ConsoleLogger)

    created = container.create_instance(Logger)

    assert type(created) is Logger
    assert created is not container.get_instance(Logger)


def test_service_shares_preset_clock_and_singleton_logger(container: Container) -> None:
    clock = FixedClock()
    container.bind(Logger).to(ConsoleLogger)
    container.bind(Clock).from_instance(clock)

    first = container.create_instance(Service)
    second = container.create_instance(Service)

    assert first is not second
    assert first.clock is clock
    assert second.clock is clock
    assert isinstance(first.logger, ConsoleLogger)
    assert first.logger is second.logger


def test_service_gets_distinct_transient_loggers(container: Container) -> None:
    clock = FixedClock()
    container.bind(Logger).to(ConsoleLogger).as_transient()
    container.bind(Clock).from_instance(clock)

    first = container.create_instance(Service)
    second = container.create_instance(Service)

    assert first.clock is second.clock
    assert first.logger is not second.logger


def test_unbind_removes_by_target_and_implementation(container: Container) -> None:
    container.bind(Logger).to(ConsoleLogger)
    container.bind(ConsoleLogger)
    container.bind(Clock)

    container.unbind(ConsoleLogger)

    assert [binding.target for binding in container.bindings] == [Container, Clock]


def test_unbind_by_target(container: Container) -> None:
    container.bind(ExternalAdapter).to(GitExtensionsAdapter)
    container.bind(ExternalAdapter).to(TortoiseGitAdapter)

    container.unbind(ExternalAdapter)

    assert container.get_instances(ExternalAdapter) == []


def test_clear_removes_every_binding(container: Container) -> None:
    container.bind(Logger)

    container.clear()

    assert container.bindings == ()
    assert container.get_instance(Container) is None


def test_ambiguous_get_instance_does_not_log(
    container: Container,
    caplog: pytest.LogCaptureFixture,
) -> None:
    container.bind(Logger)
    container.bind(Logger).to(ConsoleLogger)

    with caplog.at_level(logging.ERROR):
        container.get_instance(Logger)

    assert caplog.records == []


def test_context_manager_disposes_container() -> None:
    with Container() as container:
        container.bind(Logger)

    with pytest.raises(BindwireContainerDisposedError):
        container.get_instance(Logger)


@pytest.mark.parametrize(
    "operation",
    [
        lambda container: container.bind(Logger),
        lambda container: container.unbind(Logger),
        lambda container: container.get_instance(Logger),
        lambda container: container.get_instances(Logger),
        lambda container: container.create_eager_instances(),
        lambda container: container.create_instance(Logger),
        lambda container: container.inject(Logger()),
        lambda container: container.inject_static(Logger),
        lambda container: container.set_parent(None),
        lambda container: container.clear(),
    ],
)
def test_operations_fail_after_dispose(operation) -> None:  # type: ignore[no-untyped-def]
    container = Container()
    container.dispose()

    with pytest.raises(BindwireContainerDisposedError, match="has been disposed"):
        operation(container)
