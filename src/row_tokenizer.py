"""
Delimited-text tokenizing for published sheet exports.
"""

QUOTE_CHAR = '"'
SUPPORTED_DELIMITERS = (",", ";")


def tokenize(line, delimiter=","):
    """
    Split one line of delimited text into its fields.

    Quoted sections keep the delimiter as part of the value; the quote
    characters themselves are dropped. The last field is always emitted,
    so "a,b," gives three fields.

    Args:
        line: One logical line of the export
        delimiter: Field separator, ',' or ';'

    Returns:
        List of field strings
    """
    fields = []
    current = []
    in_quotes = False

    for char in line:
        if char == QUOTE_CHAR:
            in_quotes = not in_quotes
        elif char == delimiter and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(char)

    fields.append("".join(current))
    return fields


def split_lines(text):
    """
    Split a document into logical lines.

    A newline inside a quoted cell belongs to the cell, not to the line
    structure. Carriage returns before a line break are dropped.

    Args:
        text: Whole document text

    Returns:
        List of line strings (quotes still in place for tokenize())
    """
    lines = []
    current = []
    in_quotes = False

    for char in text:
        if char == QUOTE_CHAR:
            in_quotes = not in_quotes
            current.append(char)
        elif char == "\n" and not in_quotes:
            lines.append("".join(current).rstrip("\r"))
            current = []
        else:
            current.append(char)

    if current:
        lines.append("".join(current).rstrip("\r"))

    return lines
