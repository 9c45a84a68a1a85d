"""
UBI Feasibility Calculator - Main Streamlit App

A web application for estimating the universal basic income an
AI-transformed economy could fund, under adjustable economic and
policy assumptions.
"""

import logging
import sys
from pathlib import Path

import streamlit as st

# Configure page
st.set_page_config(
    page_title="UBI Feasibility Calculator",
    page_icon="💴",
    layout="wide",
    initial_sidebar_state="expanded"
)

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

sys.path.insert(0, str(Path(__file__).parent))

try:
    from ubi_model.ui import build_app_dependencies
    MODEL_AVAILABLE = True
except ImportError as e:
    MODEL_AVAILABLE = False
    st.error(f"⚠️ Could not import UBI model: {e}")

if MODEL_AVAILABLE:
    deps = build_app_dependencies()
    deps.run_main_app(st_module=st, deps=deps)
