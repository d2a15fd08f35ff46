"""FixtureLoader: render and parse fixture scripts with one configuration."""

from __future__ import annotations

from typing import List, Mapping, Optional, Union

from .parser import parse_script
from .renderer import render_script, render_statements
from .schemas import Layout, SequenceEncoding, Table


class FixtureLoader:
    """Render Tables to creation scripts and parse them back.

    Usage:
        loader = FixtureLoader(layout=Layout.COMPACT)
        script = loader.render(table)
        assert loader.parse(script, encodings=table.encodings()) == table

    Args:
        layout: Rendering layout; defaults to the configured one.
        dialect: sqlglot dialect for parsing; defaults to the configured one.
        database_keyword: "DATABASE", or "SCHEMA" for engines without databases.
    """

    def __init__(
        self,
        layout: Union[Layout, str, None] = None,
        dialect: Optional[str] = None,
        database_keyword: str = "DATABASE",
    ):
        self.layout = Layout(layout) if layout else None
        self.dialect = dialect
        self.database_keyword = database_keyword

    def render(self, table: Table) -> str:
        return render_script(table, self.layout, self.database_keyword)

    def render_statements(self, table: Table) -> List[str]:
        return render_statements(table, self.layout, self.database_keyword)

    def parse(
        self,
        script: str,
        encodings: Optional[Mapping[str, Union[SequenceEncoding, str]]] = None,
    ) -> Table:
        return parse_script(script, encodings=encodings, dialect=self.dialect)
