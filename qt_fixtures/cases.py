"""Checked-in fixture cases.

The feature-derivation case keeps its irregularities on purpose: ``'NULL'`` is
a category, not a missing value, c4 mixes integer and decimal tokens, and the
c5 sequences have different lengths per row. Do not normalize them.
"""
from __future__ import annotations

from .schema_spec import SchemaSpec
from .schemas import DeclaredType, SequenceEncoding, Table

FEATURE_DERIVATION_CASE_SQL = """CREATE DATABASE IF NOT EXISTS feature_derivation_case;
DROP TABLE IF EXISTS feature_derivation_case.train;
CREATE TABLE feature_derivation_case.train (
       c1 float,
       c2 float,
       c3 TEXT,
       c4 TEXT,
       c5 TEXT,
       c6 TEXT,
       class int);
INSERT INTO feature_derivation_case.train VALUES
(6.4,2.8, '1,4,2,3', '1,3,2,6', '3,140', 'MALE', 0),
(5.0,2.3, '1,3,8,3', '3,2,5,3', '93,12,1,392,49,13,398', 'FEMALE', 1),
(4.9,2.5, '9,2,2,2', '1.2,4.8,3.2,1', '10,11,32,32,1', 'FEMALE', 1),
(5.1,2.2, '2,1,8,5', '5.0,3,2,1', '23,22,1', 'FEMALE', 1),
(4.8,3.1, '3,3,2,6', '3,2,3,5', '30,3,1,32', 'NULL', 0);"""


def feature_derivation_case_spec() -> SchemaSpec:
    """Column declarations of the feature-derivation case, without rows."""
    spec = SchemaSpec("feature_derivation_case", "train")
    spec.define_column("c1", DeclaredType.FLOAT)
    spec.define_column("c2", DeclaredType.FLOAT)
    spec.define_column("c3", DeclaredType.TEXT, SequenceEncoding.COMMA_SEPARATED_INTS)
    spec.define_column("c4", DeclaredType.TEXT, SequenceEncoding.COMMA_SEPARATED_MIXED)
    spec.define_column("c5", DeclaredType.TEXT, SequenceEncoding.COMMA_SEPARATED_INTS)
    spec.define_column("c6", DeclaredType.TEXT)
    spec.define_column("class", DeclaredType.INT)
    return spec


def feature_derivation_case() -> Table:
    """The feature-derivation case as a Table."""
    spec = feature_derivation_case_spec()
    spec.add_rows([
        ["6.4", "2.8", "1,4,2,3", "1,3,2,6", "3,140", "MALE", "0"],
        ["5.0", "2.3", "1,3,8,3", "3,2,5,3", "93,12,1,392,49,13,398", "FEMALE", "1"],
        ["4.9", "2.5", "9,2,2,2", "1.2,4.8,3.2,1", "10,11,32,32,1", "FEMALE", "1"],
        ["5.1", "2.2", "2,1,8,5", "5.0,3,2,1", "23,22,1", "FEMALE", "1"],
        ["4.8", "3.1", "3,3,2,6", "3,2,3,5", "30,3,1,32", "NULL", "0"],
    ])
    return spec.build()
