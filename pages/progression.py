"""
1RM progression page - exercise list, progression chart and set table.
"""

import altair as alt
import streamlit as st

from src.design_system import get_colors
from src.presentation import chart_frame, exercise_summary, populated_sessions, table_frame
from src.sheet_loader import FAILED, IDLE, LOADED
from src.ui_utils import empty_state, get_sheet_loader, hint, metric_card, render_page_header

CHART_HEIGHT = 420


def build_progression_chart(frame, colors):
    """
    Line chart of estimated 1RM per set.

    The x axis keeps the frame's row order (training order), not
    alphabetical order.
    """
    return (
        alt.Chart(frame)
        .mark_line(point=True, strokeWidth=2, color=colors['accent'])
        .encode(
            x=alt.X(field="Session", type="nominal", sort=None, title="Zeitpunkt", axis=alt.Axis(labelAngle=-45)),
            y=alt.Y(field="1RM (kg)", type="quantitative", title="1RM (kg)", scale=alt.Scale(zero=False)),
            tooltip=[
                alt.Tooltip(field="Session", type="nominal"),
                alt.Tooltip(field="1RM (kg)", type="quantitative"),
            ],
        )
        .properties(height=CHART_HEIGHT)
    )


def render_exercise_list(catalog):
    """Exercise buttons; the selection lives in session state."""
    st.markdown("### Übungen")
    for name in catalog:
        is_selected = st.session_state.get('selected_exercise') == name
        if st.button(name, key=f"exercise_{name}", use_container_width=True,
                     type="primary" if is_selected else "secondary"):
            st.session_state.selected_exercise = name
            st.rerun()


def render_exercise(exercise):
    summary = exercise_summary(exercise)
    colors = get_colors()

    st.markdown(f"## {exercise.name} – 1RM Verlauf")

    col1, col2, col3 = st.columns(3)
    with col1:
        metric_card("Bester 1RM", f"{summary['best_one_rep_max']} kg", summary['best_session'])
    with col2:
        change = summary['change']
        metric_card("Aktueller 1RM", f"{summary['latest_one_rep_max']} kg",
                    f"+{change} kg" if change > 0 else f"{change} kg")
    with col3:
        metric_card("Sätze", summary['sets'], f"{summary['first_session']} – {summary['last_session']}")

    st.altair_chart(build_progression_chart(chart_frame(exercise), colors), use_container_width=True)
    hint("Das Diagramm zeigt alle Sätze (nicht nur das Maximum) in chronologischer "
         "Reihenfolge, bis zum letzten tatsächlich abtrainierten Trainingstag.")

    st.markdown("### Sätze")
    st.dataframe(table_frame(exercise), hide_index=True, use_container_width=True)


def run_load(loader):
    """
    Run one load and report errors that escape the loader.

    Returns:
        False when the sheet source is not configured, True otherwise
    """
    try:
        loader.url
    except ValueError as e:
        st.error(f"Konfigurationsfehler: {e}")
        st.caption("sheet_id in config.yaml oder SHEET_ID in .env setzen.")
        return False

    try:
        with st.spinner("Lade Google Sheet..."):
            loader.load()
    except Exception as e:
        # loader.state is already FAILED here
        st.error(f"Fehler beim Laden des Google Sheets: {e}")
    return True


def show():
    """Render the progression dashboard"""
    loader = get_sheet_loader()
    ui_config = st.session_state.get('ui_config', {})

    render_page_header(ui_config.get('title', '1RM Verlauf'),
                       "Geschätztes 1RM pro Satz aus dem Trainingsplan", "🏋️")

    if loader.state.status == IDLE and not run_load(loader):
        return

    state = loader.state

    if state.status == FAILED:
        st.error(state.error.user_message)
        if state.error.detail:
            st.caption(state.error.detail)
        if st.button("Erneut versuchen", key="retry_load") and run_load(loader):
            st.rerun()
        return

    if state.status != LOADED:
        empty_state("⏳", "Lade...", "Die Daten werden geladen.")
        return

    catalog = state.catalog
    sessions = populated_sessions(catalog, loader.layout)
    if sessions:
        st.caption(f"{len(catalog)} Übungen · letzter Trainingstag: {sessions[-1]}")

    if st.session_state.get('selected_exercise') not in catalog:
        st.session_state.selected_exercise = None

    list_col, detail_col = st.columns([1, 3])

    with list_col:
        render_exercise_list(catalog)
        st.markdown("---")
        if st.button("🔄 Neu laden", key="reload_sheet", use_container_width=True) and run_load(loader):
            st.rerun()

    with detail_col:
        selected = st.session_state.selected_exercise
        if selected is None:
            empty_state("📈", "Bitte eine Übung wählen", "Links eine Übung auswählen, um den 1RM-Verlauf zu sehen.")
        else:
            render_exercise(catalog[selected])
