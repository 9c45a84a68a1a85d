"""
Centralized Streamlit style definitions.
"""

APP_STYLES = """
<style>
    .ubi-card {
        background-color: #f0f2f6;
        padding: 1.5rem;
        border-radius: 1rem;
        text-align: center;
        margin-bottom: 1rem;
    }
    .ubi-amount {
        font-size: 3rem;
        font-weight: 700;
        margin: 0;
    }
    .positive-impact {
        color: #28a745;
        font-weight: bold;
    }
    .negative-impact {
        color: #dc3545;
        font-weight: bold;
    }
    .info-box {
        background-color: #e7f3ff;
        border-left: 4px solid #1f77b4;
        padding: 1rem;
        margin: 1rem 0;
        border-radius: 0.25rem;
    }
</style>
"""


def apply_app_styles(st_module) -> None:
    """Apply shared CSS style block to the Streamlit app."""
    st_module.markdown(APP_STYLES, unsafe_allow_html=True)
