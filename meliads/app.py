"""
MeliAds - Main Application
Central entry point

Thin orchestrator: bridges secrets, loads settings, and routes the
current view to its feature screen. Run with:

    streamlit run meliads/app.py
"""

import logging
import os

import streamlit as st

from meliads.config import SECRET_KEYS, configure_logging, load_settings
from meliads.core.models import ViewState
from meliads.features.campaigns import CampaignsFeature
from meliads.features.dashboard import DashboardFeature
from meliads.features.integrations import IntegrationsFeature
from meliads.features.optimization import OptimizationFeature
from meliads.features.team import TeamFeature
from meliads.ui.layout import render_header, render_sidebar, setup_page
from meliads.ui.login import render_login
from meliads.ui.session import get_state

logger = logging.getLogger(__name__)

# ==========================================
# PAGE CONFIGURATION
# ==========================================
st.set_page_config(
    page_title="MeliAds",
    layout="wide",
    page_icon="📊"
)

# BRIDGE: Load Streamlit Secrets into OS Environment for load_settings()
try:
    for key in SECRET_KEYS:
        if key in st.secrets:
            os.environ[key] = str(st.secrets[key])
except FileNotFoundError:
    pass


# ==========================================
# MAIN APPLICATION
# ==========================================
def main():
    """Main application orchestrator."""
    settings = load_settings()
    configure_logging(settings.log_level)
    if not settings.gemini_api_key:
        logger.warning("GEMINI_API_KEY is not set; AI insights will fail")

    setup_page()
    state = get_state()

    if not state.is_authenticated:
        render_login()
        return

    render_sidebar(state)
    render_header(state)

    current = state.current_view

    if current == ViewState.DASHBOARD:
        DashboardFeature(state).run()

    elif current == ViewState.CAMPAIGNS:
        CampaignsFeature(state).run()

    elif current == ViewState.OPTIMIZATION:
        OptimizationFeature(state, settings).run()

    elif current == ViewState.INTEGRATIONS:
        IntegrationsFeature(state).run()

    elif current == ViewState.TEAM:
        TeamFeature(state).run()


if __name__ == "__main__":
    main()
