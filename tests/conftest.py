"""Configuración de pytest y fixtures compartidas."""

import pytest

from backend.core.datacompare import (
    CompareContext, CompareOptions, CompareParser, CompareRegistry, RecursiveComparer,
    create_default_engine
)
from backend.core.datacompare.directives import ALL_DIRECTIVES


BASE_TIME = "2025-11-05T15:30:00+01:00"


@pytest.fixture
def parser():
    return CompareParser()


@pytest.fixture
def registry():
    """Registro con todas las directivas incluidas."""
    registry = CompareRegistry()
    registry.register_directives(directive_class() for directive_class in ALL_DIRECTIVES.values())
    return registry


@pytest.fixture
def comparer(parser, registry):
    return RecursiveComparer(parser, registry)


@pytest.fixture
def engine():
    return create_default_engine()


@pytest.fixture
def context():
    return CompareContext(start_time_test=BASE_TIME)


@pytest.fixture
def options():
    return CompareOptions()
