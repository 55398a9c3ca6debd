"""
Row Parser

Tokenizes raw CSV text into rows of cell strings and aligns every row
to the header width.

Rules:
- Delimiter is always a comma
- A field wrapped in double quotes may contain commas and newlines; a
  doubled quote inside it is one literal quote
- Records end at LF or CRLF outside quotes; a lone CR is data
- A terminator at the very end of the input does not start another row,
  and one blank line at the very end is ignored
- Whitespace outside quotes is kept verbatim
- Short rows are padded with empty cells; long rows lose their extra
  cells and a warning is recorded
"""

from typing import List, Optional, Union

from ..errors import EmptyInputError, InputTooLargeError, MalformedCsvError
from ..models import ParsedTable
from ..utils.logging_utils import get_logger
from .headers import HeaderExtractor

logger = get_logger(__name__)

DELIMITER = ','
QUOTE = '"'
BOM = '\ufeff'


class RowParser:
    """
    Parses one CSV upload into a ParsedTable.

    Attributes:
        max_rows: Ceiling on data rows (header excluded); None disables it
        header_extractor: Builds unique column names from the first record

    Example:
        >>> table = RowParser().parse('name,city\\n"Doe, J",Paris\\n')
        >>> table.rows
        (('Doe, J', 'Paris'),)
    """

    def __init__(
        self,
        max_rows: Optional[int] = None,
        header_extractor: Optional[HeaderExtractor] = None
    ):
        self.max_rows = max_rows
        self.header_extractor = header_extractor or HeaderExtractor()

    def parse(self, text: Union[str, bytes]) -> ParsedTable:
        """
        Parse CSV text into headers and width-normalized rows.

        Args:
            text: Raw CSV as str, or bytes encoded as UTF-8

        Returns:
            ParsedTable whose rows all have len(headers) cells

        Raises:
            EmptyInputError: If the input is empty or whitespace-only
            MalformedCsvError: If a quote is never closed or bytes are not UTF-8
            InputTooLargeError: If the data rows exceed max_rows
        """
        text = self._decode(text)
        if not text.strip():
            raise EmptyInputError()

        records = self.tokenize(text)
        headers = self.header_extractor.extract(records[0])
        width = len(headers)

        rows = []
        warnings = []
        padded = 0

        for number, record in enumerate(records[1:], start=1):
            if len(record) < width:
                record = record + [''] * (width - len(record))
                padded += 1
            elif len(record) > width:
                message = (
                    f"Row {number}: {len(record)} cells for {width} columns, "
                    f"dropped {len(record) - width} extra cell(s)"
                )
                logger.warning(message)
                warnings.append(message)
                record = record[:width]
            rows.append(tuple(record))

        if padded:
            logger.debug(f"Padded {padded} short row(s) to {width} cells")

        logger.debug(f"Parsed {len(rows)} rows x {width} columns")

        return ParsedTable(headers=headers, rows=tuple(rows), warnings=tuple(warnings))

    def tokenize(self, text: str) -> List[List[str]]:
        """
        Split CSV text into records of raw cell strings.

        No width normalization happens here; the first record is the header.
        """
        records: List[List[str]] = []
        record: List[str] = []
        field: List[str] = []

        in_quotes = False
        at_field_start = True
        record_open = False
        quoted_in_record = False
        pending_blank = False
        line = 1
        quote_line = 0

        i = 0
        n = len(text)

        while i < n:
            ch = text[i]

            if in_quotes:
                if ch == QUOTE:
                    if i + 1 < n and text[i + 1] == QUOTE:
                        field.append(QUOTE)
                        i += 2
                        continue
                    in_quotes = False
                else:
                    if ch == '\n':
                        line += 1
                    field.append(ch)
                i += 1
                continue

            record_open = True

            if ch == QUOTE and at_field_start:
                in_quotes = True
                at_field_start = False
                quoted_in_record = True
                quote_line = line
                i += 1
            elif ch == DELIMITER:
                record.append(''.join(field))
                field = []
                at_field_start = True
                i += 1
            elif ch == '\n' or (ch == '\r' and i + 1 < n and text[i + 1] == '\n'):
                blank = not record and not field and not quoted_in_record
                # A blank line is held back until something follows it
                if pending_blank:
                    self._append_record(records, [''])
                pending_blank = blank
                if not blank:
                    record.append(''.join(field))
                    self._append_record(records, record)
                record = []
                field = []
                at_field_start = True
                record_open = False
                quoted_in_record = False
                line += 1
                i += 2 if ch == '\r' else 1
            else:
                field.append(ch)
                at_field_start = False
                i += 1

        if in_quotes:
            raise MalformedCsvError(f"Unterminated quoted field starting on line {quote_line}")

        if record_open:
            if pending_blank:
                self._append_record(records, [''])
            record.append(''.join(field))
            self._append_record(records, record)

        return records

    def _append_record(self, records: List[List[str]], record: List[str]) -> None:
        records.append(record)
        # records[0] is the header
        if self.max_rows is not None and len(records) - 1 > self.max_rows:
            raise InputTooLargeError("rows", len(records) - 1, self.max_rows)

    @staticmethod
    def _decode(text: Union[str, bytes]) -> str:
        if isinstance(text, bytes):
            try:
                text = text.decode('utf-8')
            except UnicodeDecodeError as e:
                raise MalformedCsvError(f"Input is not valid UTF-8: {e}") from e

        if text.startswith(BOM):
            text = text[1:]

        return text
