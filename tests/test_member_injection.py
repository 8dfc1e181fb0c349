"""Tests for injectable methods on built and existing objects."""

import logging
from abc import ABC, abstractmethod

import pytest

from bindwire import Container, CreationContext, inject
from bindwire.exceptions import BindwireMemberInjectionError, BindwireUnresolvedParameterError


class Log:
    pass


class Prefs:
    pass


class EditorPrefs(Prefs):
    pass


class ProjectPrefs(Prefs):
    pass


class BaseWindow:
    def __init__(self) -> None:
        self.calls: list[str] = []

    @inject
    def construct(self, log: Log) -> None:
        self.calls.append("base.construct")
        self.log = log


class DiffWindow(BaseWindow):
    @inject
    def setup_prefs(self, prefs: Prefs) -> None:
        self.calls.append("derived.setup_prefs")
        self.prefs = prefs


class OverridingWindow(BaseWindow):
    @inject
    def construct(self, log: Log) -> None:
        self.calls.append("derived.construct")
        self.log = log


class UnmarkedOverrideWindow(BaseWindow):
    def construct(self, log: Log) -> None:
        self.calls.append("unmarked.construct")
        self.log = log


class BrokenWindow(BaseWindow):
    @inject
    def a_fail(self) -> None:
        self.calls.append("a_fail")
        raise RuntimeError("boom")

    @inject
    def b_after(self) -> None:
        self.calls.append("b_after")


class NeedsMissing:
    @inject
    def construct(self, prefs: Prefs) -> None:
        self.prefs = prefs


class Tool(ABC):
    @inject
    @abstractmethod
    def setup(self, log: Log) -> None: ...


class ConcreteTool(Tool):
    @inject
    def setup(self, log: Log) -> None:
        self.log = log


class Utils:
    log: Log | None = None
    prefs: Prefs | None = None

    @staticmethod
    @inject
    def set_log(log: Log) -> None:
        Utils.log = log

    @inject
    @classmethod
    def set_prefs(cls, prefs: Prefs) -> None:
        cls.prefs = prefs

    @inject
    def instance_only(self, log: Log) -> None:
        raise AssertionError("instance methods are not statically injected")


class Toolbar:
    @inject
    def construct(self, prefs: Prefs) -> None:
        self.prefs = prefs


class Counter:
    calls = 0

    @inject
    def construct(self) -> None:
        Counter.calls += 1


def test_default_constructed_objects_are_member_injected(container: Container) -> None:
    container.bind(Log)

    window = container.create_instance(BaseWindow)

    assert window.log is container.get_instance(Log)


def test_base_methods_run_before_derived_methods(container: Container) -> None:
    container.bind(Log)
    container.bind(Prefs).to(EditorPrefs)

    window = container.create_instance(DiffWindow)

    assert window.calls == ["base.construct", "derived.setup_prefs"]
    assert isinstance(window.prefs, EditorPrefs)


def test_overridden_method_runs_once(container: Container) -> None:
    container.bind(Log)

    window = container.create_instance(OverridingWindow)

    assert window.calls == ["derived.construct"]


def test_unmarked_override_still_runs_in_place_of_base(container: Container) -> None:
    container.bind(Log)

    window = container.create_instance(UnmarkedOverrideWindow)

    assert window.calls == ["unmarked.construct"]


def test_inject_wires_existing_objects(container: Container) -> None:
    container.bind(Log)
    window = BaseWindow()

    container.inject(window)

    assert window.log is container.get_instance(Log)


def test_failing_method_is_logged_and_stops_injection(
    container: Container,
    caplog: pytest.LogCaptureFixture,
) -> None:
    container.bind(Log)

    with caplog.at_level(logging.ERROR, logger="bindwire.resolution"):
        window = container.create_instance(BrokenWindow)

    assert window.calls == ["base.construct", "a_fail"]
    assert len(caplog.records) == 1
    record = caplog.records[0]
    assert "a_fail" in record.getMessage()
    assert record.exc_info is not None
    assert isinstance(record.exc_info[1], RuntimeError)


def test_failing_method_raises_in_strict_mode(strict_container: Container) -> None:
    strict_container.bind(Log)

    with pytest.raises(BindwireMemberInjectionError) as exc_info:
        strict_container.create_instance(BrokenWindow)

    assert exc_info.value.method_name == "a_fail"
    assert exc_info.value.instance_type is BrokenWindow
    assert isinstance(exc_info.value.__cause__, RuntimeError)


def test_unresolved_method_parameter_propagates(container: Container) -> None:
    with pytest.raises(BindwireUnresolvedParameterError) as exc_info:
        container.create_instance(NeedsMissing)

    assert exc_info.value.parameter_name == "prefs"
    assert exc_info.value.consumer_type is NeedsMissing


def test_method_parameters_respect_consumer_restrictions(container: Container) -> None:
    container.bind(Prefs).to(ProjectPrefs).when_injected_into(Toolbar)

    assert isinstance(container.create_instance(Toolbar).prefs, ProjectPrefs)


def test_abstract_methods_are_skipped_for_concrete_override(container: Container) -> None:
    container.bind(Log)

    tool = container.create_instance(ConcreteTool)

    assert tool.log is container.get_instance(Log)


def test_singleton_is_member_injected_once(container: Container) -> None:
    Counter.calls = 0
    container.bind(Counter)

    container.get_instance(Counter)
    container.get_instance(Counter)

    assert Counter.calls == 1


def test_transient_is_member_injected_each_time(container: Container) -> None:
    Counter.calls = 0
    container.bind(Counter).as_transient()

    container.get_instance(Counter)
    container.get_instance(Counter)

    assert Counter.calls == 2


def test_preset_instances_are_not_member_injected(container: Container) -> None:
    container.bind(Log)
    window = BaseWindow()
    container.bind(BaseWindow).from_instance(window)

    assert container.get_instance(BaseWindow) is window
    assert window.calls == []


def test_factory_results_are_member_injected(container: Container) -> None:
    container.bind(Log)

    def build_window(context: CreationContext) -> BaseWindow:
        return BaseWindow()

    container.bind(BaseWindow).from_method(build_window)

    window = container.get_instance(BaseWindow)

    assert window.calls == ["base.construct"]
    assert window.log is container.get_instance(Log)


def test_factory_returning_none_is_cached_as_none(container: Container) -> None:
    calls: list[CreationContext] = []

    def build_nothing(context: CreationContext) -> None:
        calls.append(context)

    container.bind(Log).from_method(build_nothing)

    assert container.get_instance(Log) is None
    assert container.get_instance(Log) is None
    assert len(calls) == 1


def test_inject_static_runs_static_and_class_methods(container: Container) -> None:
    container.bind(Log)
    container.bind(Prefs)

    container.inject_static(Utils)

    assert Utils.log is container.get_instance(Log)
    assert Utils.prefs is container.get_instance(Prefs)
