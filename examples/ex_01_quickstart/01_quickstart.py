"""Quickstart: bind types, then let the container wire constructors.

Mark the constructor with ``@inject``, bind every type that takes part in
the graph, and ask for the top-level service.
"""

from __future__ import annotations

from bindwire import Container, inject


class Paths:
    def __init__(self) -> None:
        self.repo_path = "/work/repo"


class GitRepository:
    @inject
    def __init__(self, paths: Paths) -> None:
        self.paths = paths


class GitManager:
    @inject
    def __init__(self, repository: GitRepository) -> None:
        self.repository = repository


def main() -> None:
    container = Container()
    container.bind(Paths)
    container.bind(GitRepository)
    container.bind(GitManager)

    manager = container.get_instance(GitManager)

    print(f"repo_path={manager.repository.paths.repo_path}")  # => repo_path=/work/repo

    chain = (
        f"{type(manager).__name__}"
        f">{type(manager.repository).__name__}"
        f">{type(manager.repository.paths).__name__}"
    )
    print(f"chain={chain}")  # => chain=GitManager>GitRepository>Paths


if __name__ == "__main__":
    main()
