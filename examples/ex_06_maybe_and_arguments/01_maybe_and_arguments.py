"""Optional parameters and ad hoc arguments.

This topic demonstrates:

1. ``Maybe[T]`` parameters falling back to their default or zero value.
2. Plain ad hoc arguments matched by type.
3. ``InjectionArgument`` values matched by parameter name.
4. ``with_arguments()`` storing ad hoc arguments on a binding.
"""

from __future__ import annotations

from bindwire import Container, InjectionArgument, Maybe, inject


class Paths:
    def __init__(self, repo_path: str) -> None:
        self.repo_path = repo_path


class Overlay:
    @inject
    def __init__(
        self,
        paths: Paths,
        max_depth: Maybe[int],
        cull_non_asset_paths: Maybe[bool] = True,
    ) -> None:
        self.paths = paths
        self.max_depth = max_depth
        self.cull_non_asset_paths = cull_non_asset_paths


def main() -> None:
    container = Container()

    overlay = container.create_instance(Overlay, Paths("/work/repo"))
    print(f"repo_path={overlay.paths.repo_path}")  # => repo_path=/work/repo
    print(f"max_depth={overlay.max_depth}")  # => max_depth=0
    print(f"cull={overlay.cull_non_asset_paths}")  # => cull=True

    tuned = container.create_instance(
        Overlay,
        Paths("/work/other"),
        InjectionArgument("cull_non_asset_paths", False),
        InjectionArgument("max_depth", 3),
    )
    print(f"tuned={tuned.max_depth},{tuned.cull_non_asset_paths}")  # => tuned=3,False

    container.bind(Overlay).with_arguments(Paths("/work/bound"))
    bound = container.get_instance(Overlay)
    print(f"bound_repo_path={bound.paths.repo_path}")  # => bound_repo_path=/work/bound


if __name__ == "__main__":
    main()
