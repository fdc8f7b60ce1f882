"""Raw CSV text to parsed menu board."""

from __future__ import annotations

import logging

from menuboard.core.catalog import MenuConfig
from menuboard.schemas.board import MenuBoard
from menuboard.services.content_service import normalize_content
from menuboard.services.keyword_translator import KeywordTranslator
from menuboard.services.menu_normalizer import normalize_menu
from menuboard.services.schedule_normalizer import normalize_timeslots
from menuboard.services.table_demux import (
    BAR_TABLE,
    CATEGORIES_TABLE,
    CONTENT_TABLE,
    KITCHEN_TABLE,
    TIMESLOTS_TABLE,
    demultiplex,
)
from menuboard.services.tokenizer import tokenize

logger = logging.getLogger(__name__)


def build_menu_board(text: str, config: MenuConfig) -> MenuBoard:
    """Run tokenize -> demultiplex -> normalize on one spreadsheet export.

    Each call builds a fresh object graph; ``config`` is only read.
    """
    grid = tokenize(text)
    allergen_columns = frozenset(entry.column_name for entry in config.allergens)
    tables = demultiplex(grid, KeywordTranslator.from_config(config), allergen_columns=allergen_columns)
    categories = tables[CATEGORIES_TABLE]

    board = MenuBoard(
        bar=normalize_menu(tables[BAR_TABLE], categories, config),
        kitchen=normalize_menu(tables[KITCHEN_TABLE], categories, config),
        timeslots=normalize_timeslots(tables[TIMESLOTS_TABLE], config),
        content=normalize_content(tables[CONTENT_TABLE], config),
    )
    logger.info(
        "[BOARD] parsed %d rows: bar=%d kitchen=%d timeslots=%d content=%d categories=%d",
        len(grid),
        len(tables[BAR_TABLE]),
        len(tables[KITCHEN_TABLE]),
        len(tables[TIMESLOTS_TABLE]),
        len(tables[CONTENT_TABLE]),
        len(categories),
    )
    return board
