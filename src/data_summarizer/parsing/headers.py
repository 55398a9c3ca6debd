"""
Header Extractor

Turns the first CSV record into a tuple of unique column names.

Example:
    ["name", "", "name"] -> ("name", "column_1", "name_2")
"""

from typing import List, Sequence, Tuple

from ..utils.logging_utils import get_logger

logger = get_logger(__name__)


class HeaderExtractor:
    """
    Finalizes column names from the header record.

    Empty names become ``column_<index>`` (0-based); repeated names get
    ``_2``, ``_3``, ... in order of appearance.

    Example:
        >>> HeaderExtractor().extract(["name", "age", "name"])
        ('name', 'age', 'name_2')
    """

    placeholder_template = "column_{index}"

    def extract(self, raw_header: Sequence[str]) -> Tuple[str, ...]:
        names = [
            cell if cell != "" else self.placeholder_template.format(index=index)
            for index, cell in enumerate(raw_header)
        ]

        # Names present verbatim in the header are reserved, so a generated
        # "a_2" never steals a later literal "a_2".
        reserved = set(names)
        taken = set()
        occurrences = {}
        headers: List[str] = []

        for name in names:
            if name not in taken:
                final = name
            else:
                suffix = occurrences.get(name, 1)
                while True:
                    suffix += 1
                    final = f"{name}_{suffix}"
                    if final not in taken and final not in reserved:
                        break
                occurrences[name] = suffix
                logger.debug(f"Renamed duplicate column '{name}' to '{final}'")

            taken.add(final)
            headers.append(final)

        return tuple(headers)
