"""Host objects: types the host application must allocate itself.

A ``HostObjectFactory`` claims such types. The container lets it build the
raw object, skips constructor injection, and still runs ``@inject`` methods.
"""

from __future__ import annotations

from typing import Any

from bindwire import Container, inject


class Log:
    pass


class Asset:
    @inject
    def construct(self, log: Log) -> None:
        self.log = log


class TextureAsset(Asset):
    pass


class AssetDatabase:
    def __init__(self) -> None:
        self.allocated: list[str] = []

    def owns(self, cls: type[Any]) -> bool:
        return issubclass(cls, Asset)

    def construct(self, cls: type[Any]) -> Any:
        self.allocated.append(cls.__name__)
        return cls.__new__(cls)


def main() -> None:
    database = AssetDatabase()
    container = Container(host_object_factory=database)
    container.bind(Log)

    texture = container.create_instance(TextureAsset)
    print(f"allocated={database.allocated}")  # => allocated=['TextureAsset']
    print(f"wired={texture.log is container.get_instance(Log)}")  # => wired=True

    child = Container(container)
    child.create_instance(Asset)
    print(f"allocated_by_child={database.allocated}")  # => allocated_by_child=['TextureAsset', 'Asset']


if __name__ == "__main__":
    main()
