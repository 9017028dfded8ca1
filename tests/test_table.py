"""Tests for the entry table rendering."""

import click

from muko.models import ManagedEntry
from muko.table import render_table


ENTRIES = [
    ManagedEntry(ip="127.0.0.1", domain="foo.test", alias="foo"),
    ManagedEntry(ip="127.0.0.1", domain="bar.test", alias="bar", active=False, prod_ip="1.2.3.4"),
]


class TestRenderTable:
    """Verify layout and styling of the table."""

    def test_mode_cells_coloured(self) -> None:
        """DEV is green and PROD is blue."""
        table = render_table(ENTRIES)
        assert click.style("DEV ", fg="green") in table
        assert click.style("PROD", fg="blue") in table

    def test_headers_bold(self) -> None:
        """Header cells are rendered in bold."""
        assert click.style("Mode", bold=True) in render_table(ENTRIES)

    def test_columns_aligned_without_styling(self) -> None:
        """With ANSI codes removed every row has the same width."""
        plain = click.unstyle(render_table(ENTRIES))
        assert len({len(line) for line in plain.splitlines()}) == 1
        assert "| DEV  | foo.test |" in plain
        assert "1.2.3.4" in plain
