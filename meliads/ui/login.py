"""
Login Screen
============
Email/password form wired to AuthService.
"""

import streamlit as st

from meliads.auth import AuthService
from meliads.core.state import SignedIn
from meliads.ui.session import dispatch


def render_login():
    """Renders the login form."""
    _, center, _ = st.columns([1, 2, 1])

    with center:
        st.markdown(
            "<h1 style='text-align: center;'>Meli<span style='color: #ffe600;'>Ads</span></h1>",
            unsafe_allow_html=True,
        )
        st.markdown(
            "<p style='text-align: center; color: #64748b;'>Gestão inteligente de Mercado Ads</p>",
            unsafe_allow_html=True,
        )

        with st.form("login_form"):
            email = st.text_input("E-mail", placeholder="voce@empresa.com")
            password = st.text_input("Senha", type="password")
            submitted = st.form_submit_button("Entrar", type="primary", use_container_width=True)

        if submitted:
            with st.spinner("Autenticando..."):
                result = AuthService().sign_in(email, password)
            if result["success"]:
                dispatch(SignedIn(result["user"]))
            else:
                st.error(result["error"])
