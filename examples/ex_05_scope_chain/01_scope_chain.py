"""Scope chain: child containers fall back to their parent.

A window-level container resolves its own bindings first and delegates
everything else to the application-level container.
"""

from __future__ import annotations

from bindwire import Container, inject


class Log:
    pass


class Prefs:
    name = "global"


class WindowPrefs(Prefs):
    name = "window"


class DiffWindow:
    @inject
    def __init__(self, log: Log, prefs: Prefs) -> None:
        self.log = log
        self.prefs = prefs


def main() -> None:
    application = Container()
    application.bind(Log)
    application.bind(Prefs)

    window_scope = Container(application)
    window_scope.bind(Prefs).to(WindowPrefs)

    window = window_scope.create_instance(DiffWindow)
    print(f"prefs={window.prefs.name}")  # => prefs=window
    print(f"shared_log={window.log is application.get_instance(Log)}")  # => shared_log=True

    plain = application.create_instance(DiffWindow)
    print(f"application_prefs={plain.prefs.name}")  # => application_prefs=global


if __name__ == "__main__":
    main()
