"""Member injection: ``@inject`` methods wired after construction.

This topic demonstrates:

1. Injectable methods of base classes running before derived ones.
2. ``Container.inject()`` wiring an object built elsewhere.
3. ``Container.inject_static()`` wiring static and class methods.
"""

from __future__ import annotations

from bindwire import Container, inject


class Log:
    pass


class Prefs:
    pass


class BaseWindow:
    def __init__(self) -> None:
        self.steps: list[str] = []

    @inject
    def construct(self, log: Log) -> None:
        self.steps.append("base")
        self.log = log


class DiffWindow(BaseWindow):
    @inject
    def setup(self, prefs: Prefs) -> None:
        self.steps.append("diff")
        self.prefs = prefs


class GitUtils:
    log: Log | None = None

    @staticmethod
    @inject
    def init(log: Log) -> None:
        GitUtils.log = log


def main() -> None:
    container = Container()
    container.bind(Log)
    container.bind(Prefs)

    window = container.create_instance(DiffWindow)
    print(f"steps={window.steps}")  # => steps=['base', 'diff']

    external = BaseWindow()
    container.inject(external)
    print(f"external_wired={external.log is container.get_instance(Log)}")  # => external_wired=True

    container.inject_static(GitUtils)
    print(f"static_wired={GitUtils.log is container.get_instance(Log)}")  # => static_wired=True


if __name__ == "__main__":
    main()
