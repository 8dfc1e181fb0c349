"""Lifetimes: lazy singletons, eager singletons, transients and disposal.

This topic demonstrates:

1. Default bindings building one shared instance on first use.
2. ``non_lazy()`` bindings built by ``create_eager_instances()``.
3. ``as_transient()`` bindings building a new instance every time.
4. ``dispose()`` calling ``dispose()``/``close()`` on cached singletons.
"""

from __future__ import annotations

from bindwire import Container

created: list[str] = []
disposed: list[str] = []


class Log:
    def __init__(self) -> None:
        created.append("log")


class GitManager:
    def __init__(self) -> None:
        created.append("manager")

    def dispose(self) -> None:
        disposed.append("GitManager")


class Repository:
    def close(self) -> None:
        disposed.append("Repository")


class ToolbarRenderer:
    pass


def main() -> None:
    container = Container()
    container.bind(Log)
    container.bind(GitManager).non_lazy()
    container.bind(Repository)
    container.bind(ToolbarRenderer).as_transient()

    container.create_eager_instances()
    print(f"created_after_eager={created}")  # => created_after_eager=['manager']

    same_log = container.get_instance(Log) is container.get_instance(Log)
    print(f"log_shared={same_log}")  # => log_shared=True
    print(f"created_after_log={created}")  # => created_after_log=['manager', 'log']

    same_renderer = container.get_instance(ToolbarRenderer) is container.get_instance(
        ToolbarRenderer,
    )
    print(f"renderer_shared={same_renderer}")  # => renderer_shared=False

    container.get_instance(Repository)
    container.dispose()
    print(f"disposed={disposed}")  # => disposed=['Repository', 'GitManager']


if __name__ == "__main__":
    main()
