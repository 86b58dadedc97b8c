"""
Sheet layout strategies.

A layout decides which cells of a row belong together as one set and which
training session that set belongs to. Every strategy offers the same calls:

    state = layout.prepare(rows)
    tuples, state = layout.map_row(row, row_number, state)

Each tuple is (name, weight, reps, rir, session_label) with the raw cell
text; numbers are normalized later by the record extractor. row_number is
the 1-based position of the row in the document.
"""

import re
from collections import namedtuple

FIXED_STRIDE = "fixed_stride"
HEADER_BLOCKS = "header_blocks"
PLAIN_CSV = "plain_csv"

LAYOUT_NAMES = (FIXED_STRIDE, HEADER_BLOCKS, PLAIN_CSV)

DATE_LABEL_RE = re.compile(r"^\s*(\d{1,2})\.(\d{1,2})\.(\d{2}|\d{4})\s*$")
NUMBER_CHUNK_RE = re.compile(r"(\d+)")

TimeSlot = namedtuple("TimeSlot", ["start", "end", "label"])
BlockState = namedtuple("BlockState", ["header_row", "block_starts", "day"])


def cell(row, index):
    """Return the cell at index, or "" when the row is too short."""
    if 0 <= index < len(row):
        value = row[index]
        return "" if value is None else value
    return ""


def fold(text):
    """Trim and case-fold cell text for marker comparisons."""
    return str(text).strip().casefold()


def natural_session_key(label):
    """
    Sort key for literal or synthesized session labels.

    Dates written as D.M.YYYY sort chronologically and ahead of everything
    else. Other labels compare chunk by chunk with digit runs as numbers,
    so "Woche 2" sorts before "Woche 10".
    """
    match = DATE_LABEL_RE.match(label)
    if match:
        day, month, year = (int(part) for part in match.groups())
        if year < 100:
            year += 2000
        return (0, (year, month, day))

    chunks = []
    for chunk in NUMBER_CHUNK_RE.split(label.strip()):
        if not chunk:
            continue
        if chunk.isdigit():
            chunks.append((0, int(chunk), ""))
        else:
            chunks.append((1, 0, chunk.casefold()))
    return (1, tuple(chunks))


def build_time_mapping(first_data_row=5, rows_per_block=21, rows_per_session=19,
                       weeks_count=6, days_per_week=6):
    """
    Precompute the row range of every training day in a fixed-stride sheet.

    Blocks advance day first, then week: W1 GK1, W1 GK2, ... W2 GK1, ...

    Returns:
        List of TimeSlot(start, end, label), end inclusive
    """
    mapping = []
    block_index = 1
    for week in range(1, weeks_count + 1):
        for day in range(1, days_per_week + 1):
            start = first_data_row + (block_index - 1) * rows_per_block
            mapping.append(TimeSlot(start, start + rows_per_session - 1, f"W{week} GK{day}"))
            block_index += 1
    return mapping


class FixedStrideLayout:
    """One physical row per set, training days at a fixed row stride."""

    name = FIXED_STRIDE
    rir_required = False

    def __init__(self, first_data_row=5, rows_per_block=21, rows_per_session=19,
                 weeks_count=6, days_per_week=6, exercise_col=0, weight_col=2,
                 reps_col=3, rir_col=4):
        self.exercise_col = exercise_col
        self.weight_col = weight_col
        self.reps_col = reps_col
        self.rir_col = rir_col
        self.time_mapping = build_time_mapping(
            first_data_row=first_data_row,
            rows_per_block=rows_per_block,
            rows_per_session=rows_per_session,
            weeks_count=weeks_count,
            days_per_week=days_per_week,
        )
        self._label_positions = {slot.label: i for i, slot in enumerate(self.time_mapping)}

    def prepare(self, rows):
        return None

    def label_for_row(self, row_number):
        """Return the session label for a sheet row, or None if unmapped."""
        for slot in self.time_mapping:
            if slot.start <= row_number <= slot.end:
                return slot.label
        return None

    def map_row(self, row, row_number, state=None):
        label = self.label_for_row(row_number)
        if label is None:
            return [], state

        return [(
            cell(row, self.exercise_col),
            cell(row, self.weight_col),
            cell(row, self.reps_col),
            cell(row, self.rir_col),
            label,
        )], state

    def session_sort_key(self, label):
        return self._label_positions.get(label, len(self._label_positions))


class HeaderBlockLayout:
    """
    Weeks laid out side by side as repeated column groups.

    The header row is the first row holding the block marker. Each column
    where the marker appears starts one week. Day rows (any cell whose text
    starts with the day marker prefix) set the day for the rows below.
    Every field of a set must be present in this layout, RIR included.
    """

    name = HEADER_BLOCKS
    rir_required = True

    def __init__(self, block_marker="Muskelgruppe", day_marker_prefix="Tag",
                 name_offset=2, weight_offset=6, reps_offset=7, rir_offset=8):
        self.block_marker = fold(block_marker)
        self.day_marker_prefix = fold(day_marker_prefix)
        self.name_offset = name_offset
        self.weight_offset = weight_offset
        self.reps_offset = reps_offset
        self.rir_offset = rir_offset

    def prepare(self, rows):
        """Find the header row and the starting column of every week block."""
        for row_number, row in enumerate(rows, start=1):
            starts = tuple(i for i, value in enumerate(row) if fold(value) == self.block_marker)
            if starts:
                return BlockState(header_row=row_number, block_starts=starts, day=None)
        return BlockState(header_row=None, block_starts=(), day=None)

    def day_marker(self, row):
        """Return the day text if this row is a day marker row."""
        for value in row:
            text = str(value).strip()
            if text and fold(text).startswith(self.day_marker_prefix):
                return text
        return None

    def map_row(self, row, row_number, state):
        if state is None or state.header_row is None or row_number <= state.header_row:
            return [], state

        day = self.day_marker(row)
        if day is not None:
            return [], state._replace(day=day)

        if state.day is None:
            return [], state

        tuples = []
        for week, start in enumerate(state.block_starts, start=1):
            tuples.append((
                cell(row, start + self.name_offset),
                cell(row, start + self.weight_offset),
                cell(row, start + self.reps_offset),
                cell(row, start + self.rir_offset),
                f"Woche {week}, {state.day}",
            ))
        return tuples, state

    def session_sort_key(self, label):
        return natural_session_key(label)


class PlainCsvLayout:
    """Flat log: one set per row with its date in a column."""

    name = PLAIN_CSV
    rir_required = False

    def __init__(self, header_rows=1, date_col=0, exercise_col=1, weight_col=2,
                 reps_col=3, rir_col=4):
        self.header_rows = header_rows
        self.date_col = date_col
        self.exercise_col = exercise_col
        self.weight_col = weight_col
        self.reps_col = reps_col
        self.rir_col = rir_col

    def prepare(self, rows):
        return None

    def map_row(self, row, row_number, state=None):
        if row_number <= self.header_rows:
            return [], state

        session = cell(row, self.date_col).strip()
        if not session:
            return [], state

        return [(
            cell(row, self.exercise_col),
            cell(row, self.weight_col),
            cell(row, self.reps_col),
            cell(row, self.rir_col),
            session,
        )], state

    def session_sort_key(self, label):
        return natural_session_key(label)


LAYOUT_CLASSES = {
    FIXED_STRIDE: FixedStrideLayout,
    HEADER_BLOCKS: HeaderBlockLayout,
    PLAIN_CSV: PlainCsvLayout,
}


def build_layout(name, options=None):
    """
    Create a layout strategy by name.

    Args:
        name: One of LAYOUT_NAMES
        options: Keyword arguments for the layout constructor

    Returns:
        Layout instance
    """
    if name not in LAYOUT_CLASSES:
        raise ValueError(f"Unknown sheet layout '{name}'. Expected one of: {', '.join(LAYOUT_NAMES)}")
    return LAYOUT_CLASSES[name](**(options or {}))
