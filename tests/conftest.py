"""Shared pytest fixtures for bindwire tests."""

import pytest

from bindwire.container import Container
from bindwire.dependencies import InjectionPointsExtractor


@pytest.fixture()
def container() -> Container:
    """Default permissive container."""
    return Container()


@pytest.fixture()
def strict_container() -> Container:
    """Container that raises on ambiguous bindings and failing injectable methods."""
    return Container(strict=True)


@pytest.fixture()
def extractor() -> InjectionPointsExtractor:
    """InjectionPointsExtractor instance."""
    return InjectionPointsExtractor()
