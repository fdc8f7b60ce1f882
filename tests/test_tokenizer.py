"""CSV tokenizer tests."""

from menuboard.services.tokenizer import tokenize


def test_quoted_field_keeps_comma_newline_and_escaped_quote() -> None:
    grid = tokenize('a,"b,c""d\ne",f')

    assert grid == [["a", 'b,c"d\ne', "f"]]


def test_byte_order_mark_is_stripped() -> None:
    assert tokenize("\ufeffname,price\nSoup,4") == [["name", "price"], ["Soup", "4"]]


def test_cr_lf_and_crlf_all_end_rows() -> None:
    grid = tokenize("a,b\r\nc,d\re,f\ng,h")

    assert grid == [["a", "b"], ["c", "d"], ["e", "f"], ["g", "h"]]


def test_fields_are_trimmed_and_rows_not_padded() -> None:
    grid = tokenize("  a , b ,c\nd\n")

    assert grid == [["a", "b", "c"], ["d"]]


def test_trailing_comma_yields_empty_last_field() -> None:
    assert tokenize("a,\n") == [["a", ""]]


def test_blank_line_yields_single_empty_cell_row() -> None:
    assert tokenize("a,b\n\nc,d\n") == [["a", "b"], [""], ["c", "d"]]


def test_unterminated_quote_consumes_rest_of_text() -> None:
    grid = tokenize('a,"b,c\nd,e')

    assert grid == [["a", "b,c\nd,e"]]


def test_empty_input_gives_empty_grid() -> None:
    assert tokenize("") == []
    assert tokenize("\ufeff") == []
