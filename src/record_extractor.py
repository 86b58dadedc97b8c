"""
Record extraction: tokenized rows in, per-exercise set history out.
"""

from collections import namedtuple
from types import MappingProxyType

from src.number_parser import normalize_number
from src.one_rep_max import estimate_one_rep_max

HEADER_TOKENS = {"exercise", "übung", "uebung"}

Record = namedtuple("Record", ["weight", "reps", "rir", "session", "one_rep_max"])
Exercise = namedtuple("Exercise", ["name", "records"])


def normalize_exercise_name(raw):
    """
    Trim an exercise cell and reject header text.

    Returns:
        Trimmed name, or None for empty cells and header tokens
    """
    if raw is None:
        return None
    name = str(raw).strip()
    if not name or name.casefold() in HEADER_TOKENS:
        return None
    return name


def build_record(fields, rir_required=False):
    """
    Validate one extraction tuple and turn it into a Record.

    Args:
        fields: (name, weight, reps, rir, session) raw cell values
        rir_required: Reject the set when RIR is missing instead of using 0

    Returns:
        (name, Record), or None when the set is incomplete or invalid
    """
    raw_name, raw_weight, raw_reps, raw_rir, session = fields

    name = normalize_exercise_name(raw_name)
    if name is None:
        return None

    weight = normalize_number(raw_weight)
    if weight is None or weight <= 0:
        return None

    reps = normalize_number(raw_reps)
    if reps is None or reps < 0:
        return None

    rir = normalize_number(raw_rir)
    if rir is None or rir < 0:
        if rir_required:
            return None
        rir = 0.0

    record = Record(
        weight=weight,
        reps=reps,
        rir=rir,
        session=session,
        one_rep_max=estimate_one_rep_max(weight, reps, rir),
    )
    return name, record


def extract(rows, layout):
    """
    Walk all rows through the layout and group valid sets by exercise.

    Rows are processed in document order so that state carried by the
    layout (the current training day in block sheets) flows forward.
    Invalid sets are skipped, never raised.

    Args:
        rows: Sequence of tokenized rows
        layout: Layout strategy from src.sheet_layouts

    Returns:
        Read-only mapping of exercise name -> Exercise, alphabetical
    """
    grouped = {}
    state = layout.prepare(rows)
    candidates = 0

    for row_number, row in enumerate(rows, start=1):
        tuples, state = layout.map_row(row, row_number, state)
        for fields in tuples:
            candidates += 1
            built = build_record(fields, rir_required=layout.rir_required)
            if built is None:
                continue
            name, record = built
            grouped.setdefault(name, []).append(record)

    kept = sum(len(records) for records in grouped.values())
    print(f"[PARSE] {layout.name}: {len(rows)} rows, {kept} sets kept, "
          f"{candidates - kept} skipped, {len(grouped)} exercises")

    catalog = {}
    for name in sorted(grouped, key=lambda n: (n.casefold(), n)):
        records = sorted(grouped[name], key=lambda r: layout.session_sort_key(r.session))
        catalog[name] = Exercise(name=name, records=tuple(records))

    return MappingProxyType(catalog)


def count_records(catalog):
    """Total number of sets across all exercises."""
    return sum(len(exercise.records) for exercise in catalog.values())
