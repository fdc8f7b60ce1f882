"""Delimited-text tokenizer for spreadsheet CSV exports."""

from __future__ import annotations

BOM: str = "\ufeff"


def tokenize(text: str) -> list[list[str]]:
    """Split CSV text into a grid of trimmed string cells.

    Double quotes toggle quoting, ``""`` inside a quoted field is a literal
    quote, unquoted commas end a field and unquoted CR, LF or CRLF end a row.
    Malformed quoting never raises: an unterminated quote swallows the rest of
    the text into a single field. Rows are not padded to a common length.
    """
    if not text:
        return []
    if text.startswith(BOM):
        text = text[len(BOM):]

    rows: list[list[str]] = []
    row: list[str] = []
    field: list[str] = []
    in_quote = False
    i = 0
    length = len(text)

    while i < length:
        char = text[i]
        if char == '"':
            if in_quote and i + 1 < length and text[i + 1] == '"':
                field.append('"')
                i += 1
            else:
                in_quote = not in_quote
        elif char == "," and not in_quote:
            row.append("".join(field).strip())
            field = []
        elif char in "\r\n" and not in_quote:
            if char == "\r" and i + 1 < length and text[i + 1] == "\n":
                i += 1
            row.append("".join(field).strip())
            rows.append(row)
            row = []
            field = []
        else:
            field.append(char)
        i += 1

    if field or row:
        row.append("".join(field).strip())
        rows.append(row)

    return rows
