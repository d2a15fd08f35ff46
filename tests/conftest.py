"""Pytest configuration and fixtures for qt-fixtures tests."""

import pytest

from qt_fixtures import SchemaSpec, Table, feature_derivation_case
from qt_fixtures.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    """Drop cached settings so env overrides in one test don't leak."""
    for key in ("DIALECT", "LAYOUT", "INDENT", "SEED", "MAX_SEQUENCE_LENGTH", "DEFAULT_CATEGORIES"):
        monkeypatch.delenv(f"QT_FIXTURES_{key}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# TABLE FIXTURES
# =============================================================================

@pytest.fixture
def scenario_spec() -> SchemaSpec:
    """Two columns: a raw float and an int sequence stored as text."""
    spec = SchemaSpec("t", "train")
    spec.define_column("c1", "float")
    spec.define_column("c3", "text", "comma-separated-ints")
    return spec


@pytest.fixture
def scenario_table(scenario_spec) -> Table:
    scenario_spec.add_row([6.4, "1,4,2,3"])
    return scenario_spec.build()


@pytest.fixture
def case_table() -> Table:
    """The checked-in feature-derivation case."""
    return feature_derivation_case()
