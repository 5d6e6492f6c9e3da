"""Replacement and acronym lookup tables."""

from vispeak.tables.loader import (
    EMPTY_TABLES,
    Tables,
    TableStore,
    load_lookup_table,
    parse_lookup_csv,
)

__all__ = ["EMPTY_TABLES", "TableStore", "Tables", "load_lookup_table", "parse_lookup_csv"]
