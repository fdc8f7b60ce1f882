"""Content block schemas (menu headers, texts and calls to action)."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class MenuHeader(BaseModel):
    titles: dict[str, str] = Field(default_factory=dict)
    texts: dict[str, str] = Field(default_factory=dict)
    style: str = "card"

    model_config = ConfigDict(frozen=True)


class ContentItem(BaseModel):
    type: Literal["text", "cta"]
    labels: dict[str, str] = Field(default_factory=dict)
    texts: dict[str, str] = Field(default_factory=dict)
    link: str = ""
    style: str = "plain"

    model_config = ConfigDict(frozen=True)


class ContentData(BaseModel):
    menu_header_kitchen: MenuHeader | None = None
    menu_header_bar: MenuHeader | None = None
    content_items: tuple[ContentItem, ...] = ()

    model_config = ConfigDict(frozen=True)
