#!/usr/bin/env python3
"""
Lift Progress Dashboard - Streamlit Web Interface
Main entry point for the web application.
"""

import os
import sys

import streamlit as st

# Ensure pages directory is in Python path
sys.path.insert(0, os.path.dirname(__file__))

from pages import progression
from src.design_system import get_theme_css
from src.settings import load_config

st.set_page_config(
    page_title="🏋️ 1RM Verlauf",
    page_icon="🏋️",
    layout="wide",
    initial_sidebar_state="collapsed"
)

if 'dark_mode' not in st.session_state:
    try:
        st.session_state.dark_mode = bool(load_config().get('ui', {}).get('dark_mode', False))
    except Exception as e:
        st.warning(f"Could not read config.yaml: {e}")
        st.session_state.dark_mode = False

with st.sidebar:
    st.markdown("# 🏋️ 1RM Verlauf")
    st.markdown("---")
    st.session_state.dark_mode = st.toggle("Dark Mode", value=st.session_state.dark_mode)

st.markdown(get_theme_css(), unsafe_allow_html=True)

progression.show()
