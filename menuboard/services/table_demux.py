"""Split one spreadsheet grid into the logical tables packed side by side in it.

Row 0 of the grid is the marker row (which table owns each column), row 1 is
the header row and every following row holds data for all tables at once.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping

from pydantic import BaseModel, ConfigDict

from menuboard.services.keyword_translator import KeywordTranslator

logger = logging.getLogger(__name__)

BAR_TABLE: str = "bar"
KITCHEN_TABLE: str = "kitchen"
TIMESLOTS_TABLE: str = "timeslots"
CONTENT_TABLE: str = "content"
CATEGORIES_TABLE: str = "categories"

KNOWN_TABLES: tuple[str, ...] = (BAR_TABLE, KITCHEN_TABLE, TIMESLOTS_TABLE, CONTENT_TABLE, CATEGORIES_TABLE)

# Canonical columns per table. Localized columns carry a language suffix
# (name_it, name_en, ...); allergen columns come from the allergen catalog.
MENU_COLUMNS: frozenset[str] = frozenset(
    {"active", "category", "name", "description", "price", "type", "no_gluten_option", "last_updated"}
)
CATEGORY_COLUMNS: frozenset[str] = frozenset({"id", "category_id", "order", "label"})
TIMESLOT_COLUMNS: frozenset[str] = frozenset(
    {"slot_id", "day", "label", "is_kitchen", "show_in_hero", "show_in_info", "open", "close"}
)
CONTENT_COLUMNS: frozenset[str] = frozenset({"type", "label", "text", "link", "style"})

TABLE_COLUMNS: dict[str, frozenset[str]] = {
    BAR_TABLE: MENU_COLUMNS,
    KITCHEN_TABLE: MENU_COLUMNS,
    CATEGORIES_TABLE: CATEGORY_COLUMNS,
    TIMESLOTS_TABLE: TIMESLOT_COLUMNS,
    CONTENT_TABLE: CONTENT_COLUMNS,
}
MENU_TABLES: frozenset[str] = frozenset({BAR_TABLE, KITCHEN_TABLE})

DATA_START_ROW: int = 2


class RowRecord(Mapping[str, str]):
    """Immutable row of one logical table keyed by canonical column name.

    Missing columns read as an empty string.
    """

    __slots__ = ("_fields",)

    def __init__(self, fields: Mapping[str, str]) -> None:
        self._fields: dict[str, str] = dict(fields)

    def __getitem__(self, key: str) -> str:
        return self._fields[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"RowRecord({self._fields!r})"

    def text(self, column: str) -> str:
        return (self._fields.get(column) or "").strip()

    def has_data(self) -> bool:
        return any(value.strip() for value in self._fields.values())


class TableRegion(BaseModel):
    """Inclusive column range ``[start_col, end_col]`` owned by one marker."""

    table: str
    start_col: int
    end_col: int

    model_config = ConfigDict(frozen=True)

    def slice(self, row: list[str]) -> list[str]:
        return [row[col] if col < len(row) else "" for col in range(self.start_col, self.end_col + 1)]


def find_table_regions(marker_row: list[str]) -> list[TableRegion]:
    """Coalesce contiguous identical markers into regions.

    Blank markers produce their own anonymous region, so a blank gap always
    ends the neighbouring tables.
    """
    regions: list[TableRegion] = []
    current: str | None = None
    start_col = 0
    markers = [marker.strip().lower() for marker in marker_row]
    for col, marker in enumerate(markers):
        if marker != current:
            if current is not None:
                regions.append(TableRegion(table=current, start_col=start_col, end_col=col - 1))
            current = marker
            start_col = col
    if current is not None:
        regions.append(TableRegion(table=current, start_col=start_col, end_col=len(markers) - 1))
    return regions


def unexpected_columns(
    table: str,
    headers: list[str],
    allergen_columns: frozenset[str] = frozenset(),
) -> list[str]:
    """Canonical headers that are not part of the table's known columns.

    Localized headers are matched on their prefix (``name_it`` -> ``name``).
    Menu tables also accept the allergen catalog columns.
    """
    known = TABLE_COLUMNS.get(table)
    if known is None:
        return []
    if table in MENU_TABLES:
        known = known | allergen_columns
    unexpected: list[str] = []
    for header in headers:
        if not header or header in known:
            continue
        prefix, sep, _ = header.rpartition("_")
        if sep and prefix in known:
            continue
        unexpected.append(header)
    return unexpected


def _empty_result(table_names: tuple[str, ...]) -> dict[str, list[RowRecord]]:
    return {name: [] for name in table_names}


def demultiplex(
    grid: list[list[str]],
    translator: KeywordTranslator,
    table_names: tuple[str, ...] = KNOWN_TABLES,
    allergen_columns: frozenset[str] = frozenset(),
) -> dict[str, list[RowRecord]]:
    """Return the row records of every known table found in the grid.

    Headers outside a table's known columns are still read, and logged at
    debug level.
    """
    result = _empty_result(table_names)
    if len(grid) <= DATA_START_ROW:
        return result

    regions = find_table_regions(grid[0])
    headers = translator.translate_headers(grid[1])
    data_rows = [row for row in grid[DATA_START_ROW:] if len(row) > 1]

    seen: set[str] = set()
    for region in regions:
        if region.table not in result:
            if region.table:
                logger.debug("Ignoring columns %d-%d of unknown table %r", region.start_col, region.end_col, region.table)
            continue
        if region.table in seen:
            logger.warning(
                "Table %r appears again at columns %d-%d; only its first region is read",
                region.table,
                region.start_col,
                region.end_col,
            )
            continue
        seen.add(region.table)

        table_headers = region.slice(headers)
        unexpected = unexpected_columns(region.table, table_headers, allergen_columns)
        if unexpected:
            logger.debug("Table %r has unexpected columns: %s", region.table, ", ".join(unexpected))
        for row in data_rows:
            fields: dict[str, str] = {}
            for header, value in zip(table_headers, region.slice(row)):
                if not header:
                    continue
                fields[header] = translator.translate_value(header, value)
            record = RowRecord(fields)
            if record.has_data():
                result[region.table].append(record)

    return result
