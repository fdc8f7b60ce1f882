"""Content table rows: menu headers, free texts and call-to-action links."""

from __future__ import annotations

from menuboard.core.catalog import MenuConfig
from menuboard.schemas.content import ContentData, ContentItem, MenuHeader
from menuboard.services.table_demux import RowRecord
from menuboard.utils.i18n import localized_columns


def _menu_header(row: RowRecord, config: MenuConfig) -> MenuHeader:
    return MenuHeader(
        titles=localized_columns(row, "label", config.languages),
        texts=localized_columns(row, "text", config.languages),
        style=row.text("style") or "card",
    )


def normalize_content(rows: list[RowRecord], config: MenuConfig) -> ContentData:
    """Collect content blocks in sheet order; unknown row types are ignored."""
    header_kitchen: MenuHeader | None = None
    header_bar: MenuHeader | None = None
    items: list[ContentItem] = []

    for row in rows:
        content_type = row.text("type").lower()
        if content_type == "menu_header_kitchen":
            header_kitchen = _menu_header(row, config)
        elif content_type == "menu_header_bar":
            header_bar = _menu_header(row, config)
        elif content_type == "text":
            items.append(
                ContentItem(
                    type="text",
                    labels=localized_columns(row, "label", config.languages),
                    texts=localized_columns(row, "text", config.languages),
                    style=row.text("style") or "plain",
                )
            )
        elif content_type == "cta":
            items.append(
                ContentItem(
                    type="cta",
                    labels=localized_columns(row, "label", config.languages),
                    link=row.text("link"),
                    style=row.text("style") or "secondary",
                )
            )

    return ContentData(
        menu_header_kitchen=header_kitchen,
        menu_header_bar=header_bar,
        content_items=tuple(items),
    )
