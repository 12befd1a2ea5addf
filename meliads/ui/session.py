"""
Session State Bridge

The only place that reads or writes the AppState stored in Streamlit's
session. Views call dispatch(); dispatch runs the reducer and reruns the
script so the new state is rendered.
"""

import streamlit as st

from meliads.core.mock_data import (
    default_linked_accounts,
    default_team_members,
    generate_mock_campaigns,
)
from meliads.core.state import AppState, initial_state, reduce

STATE_KEY = 'app_state'


def init_state() -> None:
    """Seed the session with mock data on first load."""
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = initial_state(
            campaigns=generate_mock_campaigns(),
            accounts=default_linked_accounts(),
            members=default_team_members(),
        )


def get_state() -> AppState:
    init_state()
    return st.session_state[STATE_KEY]


def dispatch(action, rerun: bool = True) -> AppState:
    """Apply an action to the stored state."""
    new_state = reduce(get_state(), action)
    st.session_state[STATE_KEY] = new_state
    if rerun:
        st.rerun()
    return new_state
