"""
Presentation adapter: catalog -> plain rows and DataFrames for the UI.

Rounding happens here and nowhere else.
"""

import pandas as pd

DISPLAY_DECIMALS = 2

CHART_COLUMNS = ["Session", "1RM (kg)"]
TABLE_COLUMNS = ["Session", "Weight (kg)", "Reps", "RIR", "1RM (kg)"]


def display_number(value):
    """Round for display; whole numbers come back as int."""
    rounded = round(value, DISPLAY_DECIMALS)
    if float(rounded).is_integer():
        return int(rounded)
    return rounded


def record_to_dict(record):
    return {
        "session": record.session,
        "weight": display_number(record.weight),
        "reps": display_number(record.reps),
        "rir": display_number(record.rir),
        "one_rep_max": round(record.one_rep_max, DISPLAY_DECIMALS),
    }


def catalog_to_output(catalog):
    """
    Flatten the catalog for consumers outside the parser.

    Returns:
        List of {"name", "records": [...]} dicts, alphabetical by name,
        records in session order
    """
    return [
        {
            "name": exercise.name,
            "records": [record_to_dict(record) for record in exercise.records],
        }
        for exercise in catalog.values()
    ]


def chart_points(exercise):
    """
    One point per set, in session order.

    Several sets on the same session get a set counter so every set shows
    up on the x axis ("W1 GK1", "W1 GK1 #2", ...).
    """
    seen = {}
    points = []
    for record in exercise.records:
        seen[record.session] = seen.get(record.session, 0) + 1
        count = seen[record.session]
        label = record.session if count == 1 else f"{record.session} #{count}"
        points.append((label, round(record.one_rep_max, DISPLAY_DECIMALS)))
    return points


def chart_frame(exercise):
    """DataFrame for the 1RM line chart, indexed in session order."""
    return pd.DataFrame(chart_points(exercise), columns=CHART_COLUMNS)


def table_frame(exercise):
    """DataFrame listing every set of an exercise."""
    rows = [
        (
            record.session,
            display_number(record.weight),
            display_number(record.reps),
            display_number(record.rir),
            round(record.one_rep_max, DISPLAY_DECIMALS),
        )
        for record in exercise.records
    ]
    return pd.DataFrame(rows, columns=TABLE_COLUMNS)


def exercise_summary(exercise):
    """
    Headline numbers for one exercise.

    Returns:
        Dict with best/latest 1RM, set count and first/last session,
        or None for an exercise without sets
    """
    if not exercise.records:
        return None

    first = exercise.records[0]
    last = exercise.records[-1]
    best = max(exercise.records, key=lambda r: r.one_rep_max)

    return {
        "name": exercise.name,
        "sets": len(exercise.records),
        "best_one_rep_max": round(best.one_rep_max, DISPLAY_DECIMALS),
        "best_session": best.session,
        "latest_one_rep_max": round(last.one_rep_max, DISPLAY_DECIMALS),
        "change": round(last.one_rep_max - first.one_rep_max, DISPLAY_DECIMALS),
        "first_session": first.session,
        "last_session": last.session,
    }


def populated_sessions(catalog, layout):
    """
    Session labels that hold at least one set, in training order.

    The last entry is the last session that was actually trained.
    """
    labels = {record.session for exercise in catalog.values() for record in exercise.records}
    return sorted(labels, key=layout.session_sort_key)
