"""Synthetic row generation for fixture tables.

Fills a SchemaSpec's columns with reproducible random values that follow each
column's declared type and sequence encoding. Sequence lengths vary per row on
purpose: ragged vectors are part of what a feature-derivation engine has to
cope with.
"""
from __future__ import annotations

import logging
import random
from typing import Dict, List, Mapping, Optional, Sequence

from .config import get_settings
from .schema_spec import SchemaSpec
from .schemas import Column, DeclaredType, SequenceEncoding, Table

logger = logging.getLogger(__name__)


class SyntheticTableGenerator:
    """Generates synthetic rows for a fixture table."""

    def __init__(self, seed: Optional[int] = None, max_sequence_length: Optional[int] = None):
        settings = get_settings()
        self.seed = settings.seed if seed is None else seed
        self.max_sequence_length = (
            settings.max_sequence_length if max_sequence_length is None else max_sequence_length
        )
        if self.max_sequence_length < 1:
            raise ValueError("max_sequence_length must be at least 1")
        self.default_categories = settings.category_vocabulary
        self.random = random.Random(self.seed)  # reproducible

    def generate(
        self,
        spec: SchemaSpec,
        row_count: int,
        categories: Optional[Mapping[str, Sequence[str]]] = None,
    ) -> Table:
        """Generate a new Table with ``spec``'s columns and ``row_count`` rows.

        The source spec is left untouched. The generator is reseeded on every
        call, so the same arguments always produce the same Table.

        Args:
            spec: Column declarations to follow.
            row_count: Number of rows to generate.
            categories: Vocabulary per categorical column name.
        """
        if row_count < 1:
            raise ValueError(f"row_count must be at least 1, got {row_count}")
        self.random.seed(self.seed)
        categories = categories or {}

        target = SchemaSpec.from_columns(spec.database, spec.table, spec.columns)
        rows = []
        for _ in range(row_count):
            rows.append([self._generate_value(col, categories) for col in target.columns])
        target.add_rows(rows)

        table = target.build()
        logger.debug("Generated %d rows for %s", row_count, table.qualified_name)
        return table

    def _generate_value(self, column: Column, categories: Mapping[str, Sequence[str]]) -> str:
        """Generate a single synthetic cell."""
        if column.declared_type == DeclaredType.FLOAT:
            return self._float_token()
        if column.declared_type == DeclaredType.INT:
            return str(self.random.randint(0, 1))  # class label
        if column.is_sequence:
            return self._sequence(column.sequence_encoding)

        vocabulary = categories.get(column.name) or self.default_categories
        if not vocabulary:
            raise ValueError(f"No categories available for column {column.name!r}")
        return self.random.choice(list(vocabulary))

    def _float_token(self) -> str:
        return f"{self.random.uniform(0, 10):.1f}"

    def _int_token(self) -> str:
        return str(self.random.randint(0, 400))

    def _sequence(self, encoding: SequenceEncoding) -> str:
        length = self.random.randint(1, self.max_sequence_length)
        tokens: List[str] = []
        for _ in range(length):
            if encoding == SequenceEncoding.COMMA_SEPARATED_INTS:
                tokens.append(self._int_token())
            elif encoding == SequenceEncoding.COMMA_SEPARATED_FLOATS:
                tokens.append(self._float_token())
            else:
                tokens.append(self._float_token() if self.random.random() < 0.5 else self._int_token())
        return ",".join(tokens)


def generate_table(
    spec: SchemaSpec,
    row_count: int,
    seed: Optional[int] = None,
    categories: Optional[Dict[str, Sequence[str]]] = None,
) -> Table:
    """Convenience wrapper around SyntheticTableGenerator.generate."""
    return SyntheticTableGenerator(seed=seed).generate(spec, row_count, categories)
