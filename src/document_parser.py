"""
Turn a fetched sheet export into rows of cell strings.

Two export formats are understood:
  - gviz: the Google visualization query JSON, wrapped in a JS callback
  - csv:  published CSV text, comma or semicolon separated
"""

import json

from src.errors import EmptyDocumentError, MalformedDocumentError
from src.row_tokenizer import SUPPORTED_DELIMITERS, split_lines, tokenize

GVIZ = "gviz"
CSV = "csv"
SOURCE_FORMATS = (GVIZ, CSV)

# "/*O_o*/\ngoogle.visualization.Query.setResponse(" ... ");"
GVIZ_PREFIX_LENGTH = 47
GVIZ_SUFFIX_LENGTH = 2


def unwrap_gviz(text):
    """
    Strip the gviz JS envelope and decode the JSON payload.

    Args:
        text: Raw response text from the gviz endpoint

    Returns:
        Decoded payload dict
    """
    body = text[GVIZ_PREFIX_LENGTH:-GVIZ_SUFFIX_LENGTH]
    try:
        payload = json.loads(body)
    except json.JSONDecodeError as exc:
        raise MalformedDocumentError(f"gviz payload is not valid JSON: {exc}") from exc

    if not isinstance(payload, dict):
        raise MalformedDocumentError("gviz payload is not a JSON object")
    return payload


def gviz_cell_text(cell):
    """Convert one gviz cell ({"v": ..., "f": ...} or null) to text."""
    if not cell:
        return ""
    value = cell.get("v")
    if value is None:
        return ""
    # Dates come back as "Date(2024,0,5)"; the formatted value is what the sheet shows
    if isinstance(value, str) and value.startswith("Date(") and cell.get("f"):
        return str(cell["f"])
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def parse_gviz(text):
    """
    Parse a gviz response into rows.

    Returns:
        List of row tuples, one per table row
    """
    payload = unwrap_gviz(text)
    table = payload.get("table") or {}
    if not isinstance(table, dict):
        raise MalformedDocumentError("gviz table is not an object")

    raw_rows = table.get("rows") or []
    if not isinstance(raw_rows, list):
        raise MalformedDocumentError("gviz rows are not a list")

    rows = []
    for raw_row in raw_rows:
        if not isinstance(raw_row, dict):
            raise MalformedDocumentError(f"gviz row is not an object: {raw_row!r}")
        cells = raw_row.get("c") or []
        if not isinstance(cells, list) or any(cell is not None and not isinstance(cell, dict) for cell in cells):
            raise MalformedDocumentError(f"gviz cells are malformed: {cells!r}")
        rows.append(tuple(gviz_cell_text(cell) for cell in cells))
    return rows


def parse_delimited(text, delimiter=","):
    """
    Parse delimited text into rows. Every line becomes a row, header
    included; layouts decide which rows to skip.
    """
    if delimiter not in SUPPORTED_DELIMITERS:
        raise ValueError(f"Unsupported delimiter {delimiter!r}")
    return [tuple(tokenize(line, delimiter)) for line in split_lines(text)]


def parse_document(text, source_format=GVIZ, delimiter=","):
    """
    Parse a raw export into rows.

    Args:
        text: Raw document text
        source_format: 'gviz' or 'csv'
        delimiter: Field separator for csv exports

    Returns:
        List of row tuples
    """
    if text is None or not text.strip():
        raise EmptyDocumentError("Retrieved document is empty")

    if source_format == GVIZ:
        return parse_gviz(text)
    if source_format == CSV:
        return parse_delimited(text, delimiter)
    raise ValueError(f"Unknown source format '{source_format}'")
