"""
Documented option source.

Parses the generated HTML reference tables. Every body row of every table
documents one option with four cells: key, default value, type and
description. The key cell may carry a trailing marker after the key, so only
its first token is used. The description keeps its inner markup verbatim,
because declared descriptions are compared in their formatted form.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from bs4 import BeautifulSoup, Tag

from option_docs.library.error_messages import format_error
from option_docs.library.exceptions import DataLoadingError
from option_docs.library.options.grouping import group_by_key
from option_docs.library.options.records import DocumentedOption

logger = logging.getLogger(__name__)

# lxml serialises void elements as <br/>, matching the generator's XML syntax
PARSER = "lxml"


def _cell_text(cell: Tag) -> str:
    return " ".join(cell.get_text().split())


def _body_rows(table: Tag) -> list[Tag]:
    body = table.find("tbody")
    if body is not None:
        return body.find_all("tr")
    # Parsers that do not synthesise <tbody> leave body rows directly in the table
    return [row for row in table.find_all("tr") if row.find_parent("thead") is None]


def _row_to_option(row: Tag, origin: str) -> DocumentedOption | None:
    cells = row.find_all(["td", "th"], recursive=False)
    if len(cells) < 4:
        logger.debug("Skipping row with %d cells in %s", len(cells), origin)
        return None

    key_tokens = _cell_text(cells[0]).split()
    if not key_tokens:
        logger.debug("Skipping row without key in %s", origin)
        return None

    return DocumentedOption(
        key=key_tokens[0],
        default_value=_cell_text(cells[1]),
        type_value=_cell_text(cells[2]),
        # decode_contents keeps entities such as &lt; escaped in direct text
        description=cells[3].decode_contents(),
        origin=origin,
    )


def parse_documented_options_from_html(
    html: str, origin: str
) -> list[DocumentedOption]:
    """
    Parse documented options from HTML text.

    Parameters
    ----------
    html
        Document containing one or more option tables
    origin
        Name recorded as the origin of every parsed option

    Returns
    -------
    :
        Documented options in table then row order
    """
    soup = BeautifulSoup(html, PARSER)
    options = []
    for table in soup.find_all("table"):
        for row in _body_rows(table):
            option = _row_to_option(row, origin)
            if option is not None:
                options.append(option)
    return options


def parse_documented_options_from_file(path: Path) -> list[DocumentedOption]:
    """
    Parse documented options from an HTML file.

    Raises
    ------
    OSError
        If the file cannot be read
    UnicodeDecodeError
        If the file is not UTF-8
    """
    return parse_documented_options_from_html(
        path.read_text(encoding="utf-8"), origin=path.name
    )


def parse_documented_options(
    paths: Iterable[Path],
) -> dict[str, list[DocumentedOption]]:
    """
    Parse several documentation files into one mapping grouped by key.

    A file that cannot be read contributes no options; the remaining files are
    still parsed.

    Parameters
    ----------
    paths
        Documentation files, parsed in the given order

    Returns
    -------
    :
        Mapping from key to documented occurrences
    """
    options: list[DocumentedOption] = []
    for path in paths:
        try:
            parsed = parse_documented_options_from_file(path)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read documentation file %s: %s", path, e)
            continue
        logger.debug("Parsed %d documented options from %s", len(parsed), path)
        options.extend(parsed)
    return group_by_key(options)


def find_documentation_files(folder: Path, name_filter: str) -> list[Path]:
    """
    List the documentation files in ``folder`` whose name contains ``name_filter``.

    Raises
    ------
    DataLoadingError
        If ``folder`` is not a directory
    """
    if not folder.is_dir():
        raise DataLoadingError(format_error("docs_folder_not_found", path=folder))
    return sorted(
        path
        for path in folder.iterdir()
        if path.is_file() and name_filter in path.name
    )


def parse_documented_common_options(
    folder: Path, common_section_file: str
) -> dict[str, list[DocumentedOption]]:
    """Parse the common section documentation file."""
    return parse_documented_options([folder / common_section_file])


def parse_documented_reference_options(
    folder: Path, name_filter: str
) -> dict[str, list[DocumentedOption]]:
    """Parse every reference documentation file in ``folder``."""
    return parse_documented_options(find_documentation_files(folder, name_filter))
