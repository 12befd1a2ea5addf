"""
UI Layout Components

Page setup, sidebar navigation and the top header bar.
"""

from datetime import datetime

import streamlit as st

from meliads.core.models import ViewState
from meliads.core.state import AppState, SignedOut, ViewChanged
from meliads.ui.session import dispatch
from meliads.utils.formatters import initials

NAV_ITEMS = (
    (ViewState.DASHBOARD, "📊 Visão Geral"),
    (ViewState.CAMPAIGNS, "📣 Campanhas"),
    (ViewState.OPTIMIZATION, "🧠 Otimização IA"),
)

SETTINGS_ITEMS = (
    (ViewState.INTEGRATIONS, "🔗 Integrações"),
    (ViewState.TEAM, "👥 Equipe"),
)

PAGE_CSS = """
<style>
    [data-testid="stSidebar"] { background-color: #0f172a; }
    [data-testid="stSidebar"] * { color: #e2e8f0; }
    .meliads-logo { font-size: 1.5rem; font-weight: 800; padding: 10px 0 20px 0; }
    .meliads-logo span { color: #ffe600; }
    .meliads-avatar {
        display: inline-block; width: 32px; height: 32px; border-radius: 50%;
        background: #ffe600; color: #0f172a; text-align: center; line-height: 32px; font-weight: 700;
    }
</style>
"""


def setup_page():
    """Setup page CSS and styling."""
    st.markdown(PAGE_CSS, unsafe_allow_html=True)


def _nav_button(view: ViewState, label: str, current: ViewState):
    button_type = "primary" if view == current else "secondary"
    if st.sidebar.button(label, use_container_width=True, type=button_type, key=f"nav_{view.value}"):
        dispatch(ViewChanged(view))


def render_sidebar(state: AppState):
    """
    Render sidebar navigation.

    Args:
        state: Current AppState, used to highlight the active screen
    """
    st.sidebar.markdown('<div class="meliads-logo">Meli<span>Ads</span></div>', unsafe_allow_html=True)

    for view, label in NAV_ITEMS:
        _nav_button(view, label, state.current_view)

    st.sidebar.markdown("---")
    st.sidebar.markdown("##### CONFIGURAÇÕES")

    for view, label in SETTINGS_ITEMS:
        _nav_button(view, label, state.current_view)

    st.sidebar.markdown("---")
    if state.user is not None:
        st.sidebar.caption(f"Conectado como **{state.user.name}**")
    if st.sidebar.button("🚪 Sair", use_container_width=True):
        dispatch(SignedOut())


def render_header(state: AppState):
    """Top bar with the last refresh time and the signed-in user."""
    left, right = st.columns([3, 1])
    left.caption(f"Última atualização: Hoje, {datetime.now().strftime('%H:%M')}")
    if state.user is not None:
        right.markdown(
            f"<div style='text-align: right;'><span class='meliads-avatar'>{initials(state.user.name)}</span> "
            f"{state.user.name}</div>",
            unsafe_allow_html=True,
        )
