"""
Design tokens and HTML snippets for the 1RM dashboard.
Light and dark palettes; the chart accent matches the line color.
"""

import html

import streamlit as st

COLORS = {
    'accent': '#8884D8',
    'accent_dark': '#6A66C2',
    'background': '#F7F7FA',
    'surface': '#FFFFFF',
    'success': '#2E9E5B',
    'error': '#D64545',
    'text_primary': '#1C1C28',
    'text_secondary': '#6B6B7B',
    'border_medium': '#D8D8E0',
    'border_light': '#E8E8EE',
}

COLORS_DARK = {
    'accent': '#A5A1F0',
    'accent_dark': '#8884D8',
    'background': '#121218',
    'surface': '#1E1E26',
    'success': '#4CC47F',
    'error': '#F06A6A',
    'text_primary': '#F2F2F7',
    'text_secondary': '#9A9AAE',
    'border_medium': '#33333F',
    'border_light': '#2A2A34',
}


def get_colors():
    """Current palette based on the dark mode toggle"""
    dark_mode = st.session_state.get('dark_mode', False)
    return COLORS_DARK if dark_mode else COLORS


def get_metric_card_html(label, value, delta=None, color_scheme=None):
    """Small card with a label, a big value and an optional delta line"""
    if color_scheme is None:
        color_scheme = get_colors()

    delta_html = ""
    if delta:
        delta_text = str(delta)
        delta_color = color_scheme['success'] if delta_text.startswith('+') else color_scheme['text_secondary']
        delta_html = f'<div style="font-size: 0.8rem; color: {delta_color}; margin-top: 0.25rem;">{html.escape(delta_text)}</div>'

    return f"""
    <div class="metric-card" style="
        background: {color_scheme['surface']};
        border: 1px solid {color_scheme['border_medium']};
        border-top: 3px solid {color_scheme['accent']};
        padding: 0.875rem 1rem;
        border-radius: 10px;
    ">
        <div style="font-size: 0.7rem; text-transform: uppercase; font-weight: 700; color: {color_scheme['text_secondary']}; letter-spacing: 0.05em;">{html.escape(str(label))}</div>
        <div style="font-size: 1.6rem; font-weight: 700; color: {color_scheme['text_primary']}; margin-top: 0.25rem;">{html.escape(str(value))}</div>
        {delta_html}
    </div>
    """.strip()


def get_empty_state_html(icon, title, description, color_scheme=None):
    """Placeholder shown while nothing is selected or loaded"""
    if color_scheme is None:
        color_scheme = get_colors()

    icon_block = ""
    if icon:
        icon_block = f'<div style="font-size: 2.5rem; margin-bottom: 0.75rem;">{icon}</div>'

    return f"""
    <div style="
        text-align: center;
        padding: 2.5rem 2rem;
        background: {color_scheme['surface']};
        border: 1px dashed {color_scheme['border_medium']};
        border-radius: 12px;
        margin: 1.5rem 0;
    ">
        {icon_block}
        <div style="font-size: 1.15rem; font-weight: 600; margin-bottom: 0.4rem; color: {color_scheme['text_primary']};">{html.escape(str(title))}</div>
        <div style="color: {color_scheme['text_secondary']}; line-height: 1.5;">{html.escape(str(description))}</div>
    </div>
    """.strip()


def get_hint_html(text, color_scheme=None):
    """Footnote under the chart"""
    if color_scheme is None:
        color_scheme = get_colors()

    return f"""
    <div style="
        margin-top: 0.75rem;
        padding: 0.75rem 1rem;
        border-left: 3px solid {color_scheme['accent']};
        background: {color_scheme['surface']};
        color: {color_scheme['text_secondary']};
        font-size: 0.85rem;
        border-radius: 4px;
    "><strong>Hinweis:</strong> {html.escape(str(text))}</div>
    """.strip()


def get_theme_css(color_scheme=None):
    """Page-level CSS for the active palette"""
    if color_scheme is None:
        color_scheme = get_colors()

    return f"""
    <style>
    .stApp {{
        background: {color_scheme['background']};
        color: {color_scheme['text_primary']};
    }}
    .main-header {{
        font-size: 2rem;
        font-weight: 700;
        margin-bottom: 0.25rem;
    }}
    .sub-header {{
        font-size: 1rem;
        color: {color_scheme['text_secondary']};
        margin-bottom: 1.5rem;
    }}
    @media (max-width: 768px) {{
        .main-header {{
            font-size: 1.5rem;
        }}
        .row-widget.stHorizontalBlock {{
            flex-direction: column;
        }}
    }}
    </style>
    """
