"""Binding options: implementations, instances, factories, ids and restrictions.

This topic demonstrates:

1. ``to()`` binding an interface to a concrete type.
2. ``from_instance()`` sharing a pre-built object.
3. ``from_method()`` building through a factory.
4. ``with_id()`` choosing a binding by parameter name.
5. ``when_injected_into()`` choosing a binding by consumer type.
6. ``list[T]`` parameters collecting every unrestricted binding.
"""

from __future__ import annotations

from bindwire import Container, CreationContext, inject


class Prefs:
    name = "prefs"


class EditorPrefs(Prefs):
    name = "editor"


class ProjectPrefs(Prefs):
    name = "project"


class Paths:
    def __init__(self, repo_path: str) -> None:
        self.repo_path = repo_path


class Log:
    def __init__(self, prefix: str) -> None:
        self.prefix = prefix


class ExternalAdapter:
    pass


class GitExtensionsAdapter(ExternalAdapter):
    pass


class TortoiseGitAdapter(ExternalAdapter):
    pass


class DiffWindow:
    @inject
    def __init__(self, prefs: Prefs, repo_paths: Paths, log: Log) -> None:
        self.prefs = prefs
        self.repo_paths = repo_paths
        self.log = log


class Toolbar:
    @inject
    def __init__(self, prefs: Prefs, backup_paths: Paths) -> None:
        self.prefs = prefs
        self.backup_paths = backup_paths


class ExternalManager:
    @inject
    def __init__(self, adapters: list[ExternalAdapter]) -> None:
        self.adapters = adapters


def build_log(context: CreationContext) -> Log:
    paths = context.container.get_instance(Paths, "repo_paths")
    return Log(f"[{paths.repo_path}]")


def main() -> None:
    container = Container()
    container.bind(Prefs).to(EditorPrefs).when_injected_into(DiffWindow)
    container.bind(Prefs).to(ProjectPrefs).when_injected_into(Toolbar)
    container.bind(Paths).from_instance(Paths("/work/repo")).with_id("repo_paths")
    container.bind(Paths).from_instance(Paths("/work/backup")).with_id("backup_paths")
    container.bind(Log).from_method(build_log)
    container.bind(ExternalAdapter).to(GitExtensionsAdapter)
    container.bind(ExternalAdapter).to(TortoiseGitAdapter)

    window = container.create_instance(DiffWindow)
    print(f"window_prefs={window.prefs.name}")  # => window_prefs=editor
    print(f"window_repo={window.repo_paths.repo_path}")  # => window_repo=/work/repo
    print(f"log_prefix={window.log.prefix}")  # => log_prefix=[/work/repo]

    toolbar = container.create_instance(Toolbar)
    print(f"toolbar_prefs={toolbar.prefs.name}")  # => toolbar_prefs=project
    print(f"toolbar_backup={toolbar.backup_paths.repo_path}")  # => toolbar_backup=/work/backup

    manager = container.create_instance(ExternalManager)
    names = ",".join(type(adapter).__name__ for adapter in manager.adapters)
    print(f"adapters={names}")  # => adapters=GitExtensionsAdapter,TortoiseGitAdapter


if __name__ == "__main__":
    main()
