"""
UI helpers shared by the dashboard page.
"""

import html

import streamlit as st

from src.design_system import (
    get_colors,
    get_empty_state_html,
    get_hint_html,
    get_metric_card_html,
)
from src.settings import build_pipeline_config, build_sheet_source, layout_for, load_config
from src.sheet_loader import SheetLoader


def get_sheet_loader():
    """
    Per-session SheetLoader, created from config.yaml on first use.

    Returns:
        SheetLoader stored in st.session_state
    """
    if 'sheet_loader' not in st.session_state:
        config = load_config()
        pipeline_config = build_pipeline_config(config)
        st.session_state.sheet_loader = SheetLoader(
            source=build_sheet_source(config),
            pipeline_config=pipeline_config,
            layout=layout_for(pipeline_config),
        )
        st.session_state.ui_config = config.get('ui', {})
    return st.session_state.sheet_loader


def render_page_header(title, subtitle=None, title_icon=""):
    """
    Render the page title and optional subtitle.

    Args:
        title: Main page title
        subtitle: Optional subtitle text
        title_icon: Optional emoji before the title
    """
    icon_text = f"{title_icon} " if title_icon else ""
    st.markdown(
        f'<div class="main-header">{icon_text}{html.escape(title)}</div>',
        unsafe_allow_html=True
    )
    if subtitle:
        st.markdown(
            f'<div class="sub-header">{html.escape(subtitle)}</div>',
            unsafe_allow_html=True
        )


def metric_card(label, value, delta=None):
    st.markdown(get_metric_card_html(label, value, delta, get_colors()), unsafe_allow_html=True)


def empty_state(icon, title, description):
    """
    Render a consistent empty state.

    Args:
        icon: Emoji icon
        title: Empty state title
        description: Empty state description
    """
    st.markdown(get_empty_state_html(icon, title, description, get_colors()), unsafe_allow_html=True)


def hint(text):
    st.markdown(get_hint_html(text, get_colors()), unsafe_allow_html=True)
