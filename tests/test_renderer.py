"""Tests for the fixture renderer."""

import pytest

from qt_fixtures import (
    FEATURE_DERIVATION_CASE_SQL,
    EmptyTableError,
    Layout,
    SchemaSpec,
    render_script,
    render_statements,
)


class TestRenderCompact:
    def test_scenario_create_and_insert(self, scenario_table):
        script = render_script(scenario_table, layout=Layout.COMPACT)
        assert (
            "CREATE TABLE t.train (c1 float, c3 TEXT); "
            "INSERT INTO t.train VALUES (6.4, '1,4,2,3');"
        ) in script

    def test_full_compact_script(self, scenario_table):
        script = render_script(scenario_table, layout="compact")
        assert script == (
            "CREATE DATABASE IF NOT EXISTS t; "
            "DROP TABLE IF EXISTS t.train; "
            "CREATE TABLE t.train (c1 float, c3 TEXT); "
            "INSERT INTO t.train VALUES (6.4, '1,4,2,3');"
        )

    def test_multi_row_insert_keeps_insertion_order(self, scenario_spec):
        scenario_spec.add_rows([[3.0, "3"], [1.0, "1"], [2.0, "2"]])
        script = render_script(scenario_spec.build(), layout=Layout.COMPACT)
        assert "VALUES (3.0, '3'), (1.0, '1'), (2.0, '2');" in script


class TestRenderPretty:
    def test_statement_order(self, case_table):
        statements = render_statements(case_table, layout=Layout.PRETTY)
        assert [s.split()[0:2] for s in statements] == [
            ["CREATE", "DATABASE"],
            ["DROP", "TABLE"],
            ["CREATE", "TABLE"],
            ["INSERT", "INTO"],
        ]

    def test_pretty_matches_checked_in_layout(self, case_table):
        script = render_script(case_table, layout=Layout.PRETTY)
        expected_head = FEATURE_DERIVATION_CASE_SQL.split("INSERT")[0]
        assert script.startswith(expected_head)
        assert script.endswith("(4.8, 3.1, '3,3,2,6', '3,2,3,5', '30,3,1,32', 'NULL', 0);")

    def test_one_row_per_line(self, case_table):
        script = render_script(case_table, layout=Layout.PRETTY)
        insert = script.split("VALUES\n", 1)[1]
        assert len(insert.splitlines()) == len(case_table.rows)

    def test_default_layout_from_settings(self, scenario_table, monkeypatch):
        from qt_fixtures.config import get_settings

        assert "\n" in render_script(scenario_table)

        monkeypatch.setenv("QT_FIXTURES_LAYOUT", "compact")
        get_settings.cache_clear()
        assert "\n" not in render_script(scenario_table)

    def test_custom_indent(self, scenario_table):
        script = render_script(scenario_table, layout=Layout.PRETTY, indent=2)
        assert "(\n  c1 float,\n  c3 TEXT);" in script


class TestRenderContract:
    def test_deterministic(self, case_table):
        assert render_script(case_table) == render_script(case_table)

    def test_numeric_cells_unquoted_text_cells_quoted(self, case_table):
        script = render_script(case_table, layout=Layout.COMPACT)
        assert "(6.4, 2.8, '1,4,2,3', '1,3,2,6', '3,140', 'MALE', 0)" in script

    def test_null_category_is_quoted(self, case_table):
        assert "'NULL', 0)" in render_script(case_table)

    def test_quotes_not_escaped(self):
        spec = SchemaSpec("db", "t")
        spec.define_column("c6", "text")
        spec.add_row(["it's"])
        assert "VALUES ('it's');" in render_script(spec.build(), layout=Layout.COMPACT)

    def test_keyword_identifiers_quoted(self):
        spec = SchemaSpec("table", "t")
        spec.define_column("select", "int")
        spec.define_column("class", "int")
        spec.add_row([1, 0])
        statements = render_statements(spec.build(), layout=Layout.COMPACT)
        assert statements[0] == 'CREATE DATABASE IF NOT EXISTS "table"'
        assert statements[2] == 'CREATE TABLE "table".t ("select" int, class int)'

    def test_schema_keyword(self, scenario_table):
        statements = render_statements(scenario_table, database_keyword="SCHEMA")
        assert statements[0] == "CREATE SCHEMA IF NOT EXISTS t"

    def test_statements_have_no_terminators(self, scenario_table):
        assert not any(s.endswith(";") for s in render_statements(scenario_table))

    def test_no_rows(self, scenario_spec):
        with pytest.raises(EmptyTableError):
            render_script(scenario_spec.build())

    def test_no_columns(self):
        with pytest.raises(EmptyTableError):
            render_script(SchemaSpec("db", "t").build())
