"""QueryTorque Fixtures — schema-driven SQL test fixtures.

Builds small tables whose columns mix scalar numerics, comma-separated
numeric sequences stored as text, and categorical text, for exercising a
feature-type inference engine.

Flow:
1. Declare:   SchemaSpec (columns + literal rows, validated on entry)
2. Generate:  SyntheticTableGenerator (optional, reproducible random rows)
3. Render:    Table -> creation script (deterministic)
4. Parse:     creation script -> Table (single forward pass)
5. Seed:      DuckDBSeeder (optional)

Usage:
    from qt_fixtures import SchemaSpec, render_script, parse_script

    spec = SchemaSpec("t", "train")
    spec.define_column("c1", "float")
    spec.define_column("c3", "text", "comma-separated-ints")
    spec.add_row([6.4, "1,4,2,3"])
    table = spec.build()

    script = render_script(table)
    assert parse_script(script, encodings=table.encodings()) == table
"""

__version__ = "0.1.0"

from .cases import FEATURE_DERIVATION_CASE_SQL, feature_derivation_case
from .errors import (
    ArityMismatchError,
    DuplicateColumnError,
    EmptyTableError,
    FixtureError,
    InvalidEncodingError,
    MalformedScriptError,
    TypeMismatchError,
)
from .generator import SyntheticTableGenerator, generate_table
from .loader import FixtureLoader
from .parser import ParseState, parse_script
from .renderer import render_script, render_statements
from .schema_spec import SchemaSpec
from .schemas import (
    Column,
    DeclaredType,
    Layout,
    SequenceEncoding,
    Table,
)

__all__ = [
    "__version__",
    # Declaration
    "SchemaSpec",
    "Column",
    "Table",
    "DeclaredType",
    "SequenceEncoding",
    # Render / parse
    "render_script",
    "render_statements",
    "parse_script",
    "FixtureLoader",
    "ParseState",
    "Layout",
    # Generation
    "SyntheticTableGenerator",
    "generate_table",
    # Cases
    "FEATURE_DERIVATION_CASE_SQL",
    "feature_derivation_case",
    # Errors
    "FixtureError",
    "DuplicateColumnError",
    "InvalidEncodingError",
    "ArityMismatchError",
    "TypeMismatchError",
    "EmptyTableError",
    "MalformedScriptError",
]
