import logging

import pytest

from data_summarizer.errors import EmptyInputError, InputTooLargeError, MalformedCsvError
from data_summarizer.parsing import RowParser


def test_quoted_delimiter_is_kept_literally(parser):
    assert parser.tokenize('"a,b",c') == [["a,b", "c"]]


def test_doubled_quote_is_one_literal_quote(parser):
    assert parser.tokenize('"a""b",c') == [['a"b', "c"]]


def test_quoted_field_may_contain_newlines(parser):
    table = parser.parse('id,text\n1,"line one\nline two"\n2,plain\n')

    assert table.rows == (("1", "line one\nline two"), ("2", "plain"))


def test_crlf_and_lf_both_end_rows(parser):
    table = parser.parse("a,b\r\n1,2\r\n3,4\n5,6")

    assert table.headers == ("a", "b")
    assert table.rows == (("1", "2"), ("3", "4"), ("5", "6"))


def test_lone_carriage_return_is_data(parser):
    table = parser.parse("a\nx\ry\n")

    assert table.rows == (("x\ry",),)


def test_trailing_newline_does_not_add_empty_row(parser):
    table = parser.parse("a,b\n1,2\n")

    assert table.row_count == 1


def test_whitespace_outside_quotes_is_preserved(parser):
    table = parser.parse("a, b\n 1 ,2 \n")

    assert table.headers == ("a", " b")
    assert table.rows == ((" 1 ", "2 "),)


def test_quote_inside_unquoted_field_is_literal(parser):
    table = parser.parse('size\n5" screen\n')

    assert table.rows == (('5" screen',),)


def test_equal_width_rows_match_header_length(parser):
    table = parser.parse("a,b,c\n1,2,3\n4,5,6\n7,8,9\n")

    assert all(len(row) == len(table.headers) for row in table.rows)
    assert table.warnings == ()


def test_short_rows_are_padded_with_empty_cells(parser):
    table = parser.parse("a,b,c\n1\n2,3\n")

    assert table.rows == (("1", "", ""), ("2", "3", ""))
    assert table.warnings == ()


def test_long_rows_are_truncated_with_warning(parser, caplog):
    with caplog.at_level(logging.WARNING):
        table = parser.parse("a,b\n1,2\n3,4,5,6\n")

    assert table.rows == (("1", "2"), ("3", "4"))
    assert len(table.warnings) == 1
    assert "Row 2" in table.warnings[0]
    assert "dropped 2 extra" in table.warnings[0]
    assert "dropped 2 extra" in caplog.text


def test_header_only_input_has_no_rows(parser):
    table = parser.parse("a,b\n")

    assert table.headers == ("a", "b")
    assert table.rows == ()


def test_blank_interior_line_becomes_padded_row(parser):
    table = parser.parse("a,b\n1,2\n\n3,4\n")

    assert table.rows == (("1", "2"), ("", ""), ("3", "4"))


def test_single_trailing_blank_line_is_ignored(parser):
    assert parser.parse("a,b\n1,2\n\n").row_count == 1
    assert parser.parse("a,b\r\n1,2\r\n\r\n").row_count == 1


def test_only_the_last_of_several_trailing_blank_lines_is_ignored(parser):
    table = parser.parse("a,b\n1,2\n\n\n")

    assert table.rows == (("1", "2"), ("", ""))


def test_trailing_quoted_empty_field_is_a_row(parser):
    table = parser.parse("a\n1\n\"\"\n")

    assert table.rows == (("1",), ("",))


def test_trailing_blank_line_does_not_count_toward_row_ceiling():
    assert RowParser(max_rows=2).parse("a\n1\n2\n\n").row_count == 2


@pytest.mark.parametrize("text", ["", "   ", "\n\n", " \r\n\t"])
def test_empty_input_is_rejected(parser, text):
    with pytest.raises(EmptyInputError):
        parser.parse(text)


def test_unterminated_quote_is_malformed(parser):
    with pytest.raises(MalformedCsvError):
        parser.parse('"abc')


def test_unterminated_quote_after_valid_rows_reports_line(parser):
    with pytest.raises(MalformedCsvError, match="line 3"):
        parser.parse('a,b\n1,2\n3,"oops\n4,5\n')


def test_bytes_input_is_decoded_and_bom_removed(parser):
    table = parser.parse("\ufeffname,city\nJosé,Zürich\n".encode("utf-8"))

    assert table.headers == ("name", "city")
    assert table.rows == (("José", "Zürich"),)


def test_invalid_utf8_bytes_are_malformed(parser):
    with pytest.raises(MalformedCsvError):
        parser.parse(b"a\n\xff\xfe\n")


def test_row_ceiling_is_enforced():
    parser = RowParser(max_rows=2)

    assert parser.parse("a\n1\n2\n").row_count == 2
    with pytest.raises(InputTooLargeError) as exc_info:
        parser.parse("a\n1\n2\n3\n")
    assert exc_info.value.measure == "rows"
    assert exc_info.value.limit == 2


def test_duplicate_headers_are_renamed(parser):
    table = parser.parse("name,age,name\nAda,36,Lovelace\n")

    assert table.headers == ("name", "age", "name_2")
    assert table.column(2) == ("Lovelace",)
