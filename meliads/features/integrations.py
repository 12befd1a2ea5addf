"""
Integrations Module - Linked Mercado Livre accounts
"""

import time
from datetime import datetime

import streamlit as st

from meliads.core.account_management import connect_account
from meliads.core.models import AccountStatus
from meliads.core.state import AccountConnected, AccountDisconnected, AccountRefreshed
from meliads.features._base import BaseFeature
from meliads.ui.session import dispatch
from meliads.utils.formatters import format_datetime

# Stand-in for the OAuth redirect round trip
OAUTH_DELAY_SECONDS = 2

STATUS_LABELS = {
    AccountStatus.CONNECTED: "✅ Ativo",
    AccountStatus.EXPIRED: "⚠️ Token Expirado",
    AccountStatus.ERROR: "❌ Erro de Conexão",
}


class IntegrationsFeature(BaseFeature):
    """Contas Vinculadas screen."""

    def render_ui(self):
        self.render_header("Contas Vinculadas", "Conecte suas contas do Mercado Livre para importar campanhas.")

        if st.button("➕ Vincular Nova Conta", type="primary"):
            with st.spinner("Conectando..."):
                time.sleep(OAUTH_DELAY_SECONDS)
                accounts = connect_account(self.state.accounts)
            dispatch(AccountConnected(accounts[-1]))

        if not self.state.accounts:
            st.info("Nenhuma conta vinculada no momento.")
        else:
            for account in self.state.accounts:
                with st.container(border=True):
                    info, status, actions = st.columns([4, 2, 2])
                    with info:
                        st.markdown(f"**{account.nickname}**")
                        st.caption(f"Seller ID: {account.seller_id} · "
                                   f"Sincronizado: {format_datetime(account.last_sync)}")
                    status.markdown(STATUS_LABELS[account.status])
                    with actions:
                        if account.status != AccountStatus.CONNECTED:
                            if st.button("🔄 Renovar", key=f"refresh_{account.id}"):
                                dispatch(AccountRefreshed(account.id, datetime.now()))
                        if st.button("🗑️ Desvincular", key=f"disconnect_{account.id}"):
                            st.session_state['confirm_disconnect'] = account.id
                            st.rerun()

        self._render_disconnect_confirmation()

        st.caption(
            "Utilizamos a API oficial do Mercado Livre para leitura de dados. Suas credenciais de login "
            "do Mercado Livre nunca são salvas em nossos servidores. O acesso é feito via token OAuth2 "
            "com validade de 6 horas, renovado automaticamente."
        )

    def _render_disconnect_confirmation(self):
        account_id = st.session_state.get('confirm_disconnect')
        if not account_id:
            return
        st.warning("Tem certeza que deseja desvincular esta conta? Os dados deixarão de ser atualizados.")
        yes, no = st.columns(2)
        if yes.button("Desvincular", type="primary"):
            del st.session_state['confirm_disconnect']
            dispatch(AccountDisconnected(account_id))
        if no.button("Cancelar"):
            del st.session_state['confirm_disconnect']
            st.rerun()
