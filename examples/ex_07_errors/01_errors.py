"""Errors and troubleshooting.

This topic demonstrates:

1. ``BindwireIncompatibleImplementationError`` raised while binding.
2. ``BindwireUnresolvedParameterError`` naming the missing parameter.
3. ``BindwireCycleDetectedError`` for constructors that need each other.
4. ``BindwireAmbiguousBindingError`` from a ``strict=True`` container.
"""

from __future__ import annotations

from bindwire import Container, inject
from bindwire.exceptions import (
    BindwireAmbiguousBindingError,
    BindwireCycleDetectedError,
    BindwireIncompatibleImplementationError,
    BindwireUnresolvedParameterError,
)


class Prefs:
    pass


class EditorPrefs(Prefs):
    pass


class ProjectPrefs(Prefs):
    pass


class Callbacks:
    pass


class GitManager:
    @inject
    def __init__(self, callbacks: Callbacks) -> None:
        self.callbacks = callbacks


class Window:
    @inject
    def __init__(self, panel: Panel) -> None:
        self.panel = panel


class Panel:
    @inject
    def __init__(self, window: Window) -> None:
        self.window = window


class Toolbar:
    @inject
    def __init__(self, prefs: Prefs) -> None:
        self.prefs = prefs


def main() -> None:
    container = Container()

    try:
        container.bind(Prefs).to(Callbacks)
    except BindwireIncompatibleImplementationError as error:
        print(f"incompatible={type(error).__name__}")  # => incompatible=BindwireIncompatibleImplementationError

    try:
        container.create_instance(GitManager)
    except BindwireUnresolvedParameterError as error:
        print(f"unresolved={error.parameter_name}")  # => unresolved=callbacks

    container.bind(Window)
    try:
        container.create_instance(Panel)
    except BindwireCycleDetectedError as error:
        print(f"cycle={error.consumer_type.__name__}<->{error.dependency_type.__name__}")  # => cycle=Panel<->Window

    strict = Container(strict=True)
    strict.bind(Prefs).to(EditorPrefs)
    strict.bind(Prefs).to(ProjectPrefs)
    try:
        strict.create_instance(Toolbar)
    except BindwireAmbiguousBindingError as error:
        print(f"ambiguous={len(error.candidates)}")  # => ambiguous=2


if __name__ == "__main__":
    main()
