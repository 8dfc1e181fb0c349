from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class HostObjectFactory(Protocol):
    """Build objects owned by a host object model that cannot be built by calling the class.

    The container asks ``owns`` before building any type. When it returns
    ``True``, ``construct`` allocates the raw object and the container skips
    constructor injection, but still runs member injection on the result.

    Examples:
        .. code-block:: python

            class AssetFactory:
                def owns(self, cls: type[Any]) -> bool:
                    return issubclass(cls, Asset)

                def construct(self, cls: type[Any]) -> Any:
                    return asset_database.create(cls)


            container = Container(host_object_factory=AssetFactory())

    """

    def owns(self, cls: type[Any]) -> bool:
        """Return whether ``cls`` must be built by this factory."""
        ...

    def construct(self, cls: type[Any]) -> Any:
        """Return a new raw instance of ``cls``."""
        ...
