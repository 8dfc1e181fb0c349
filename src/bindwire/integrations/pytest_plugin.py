from __future__ import annotations

from collections.abc import Iterator

import pytest

from bindwire.container import Container


@pytest.fixture()
def bindwire_container() -> Iterator[Container]:
    """Create a per-test container that is disposed when the test finishes.

    The fixture is function-scoped, so bindings and cached singletons are
    isolated between tests unless users override the fixture scope.

    Yields:
        A new ``Container`` instance.

    """
    container = Container()
    yield container
    container.dispose()
