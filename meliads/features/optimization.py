"""
Optimization Module - AI Advisor

Sends the campaign list to Gemini and renders the markdown report.
The request runs under a spinner with the configured timeout; while it is
in flight the trigger button is disabled and the reducer ignores new
requests.
"""

import streamlit as st

from meliads.api.gemini_client import GeminiClient, InsightsRequestor
from meliads.config import Settings
from meliads.core.models import ViewState
from meliads.core.state import InsightsRequested, InsightsResolved, ViewChanged
from meliads.features._base import BaseFeature
from meliads.ui.session import dispatch, get_state


class OptimizationFeature(BaseFeature):
    """MeliAds AI Advisor screen."""

    def __init__(self, state, settings: Settings):
        super().__init__(state)
        self.settings = settings

    def render_ui(self):
        st.markdown("<div style='text-align: center; font-size: 2.5rem;'>🧠</div>", unsafe_allow_html=True)
        st.markdown("<h1 style='text-align: center;'>MeliAds AI Advisor</h1>", unsafe_allow_html=True)
        st.markdown(
            "<p style='text-align: center; color: #64748b;'>Nossa inteligência artificial analisa seus "
            "dados em tempo real para encontrar oportunidades de lucro e reduzir desperdícios.</p>",
            unsafe_allow_html=True,
        )

        task = self.state.insights

        if task.busy:
            # A previous run was interrupted mid-request; finish it now
            self._run_analysis()
            return

        if task.report is None:
            with st.container(border=True):
                st.subheader("Pronto para otimizar?")
                st.write(f"Clique abaixo para processar os dados das suas {len(self.state.campaigns)} campanhas.")
                if st.button("Gerar Análise Completa", type="primary", disabled=task.busy):
                    dispatch(InsightsRequested(), rerun=False)
                    self._run_analysis()
            return

        with st.container(border=True):
            header, refresh = st.columns([4, 1])
            header.subheader("🧠 Relatório de Otimização")
            if refresh.button("Atualizar Análise", disabled=task.busy):
                dispatch(InsightsRequested(), rerun=False)
                self._run_analysis()
            st.markdown(task.report)
            if st.button("Ir para Campanhas e aplicar mudanças →"):
                dispatch(ViewChanged(ViewState.CAMPAIGNS))

    def _run_analysis(self):
        requestor = InsightsRequestor(GeminiClient.from_settings(self.settings))
        with st.spinner("Analisando métricas... Identificando padrões de ACOS e ROAS."):
            result = requestor.request(get_state().campaigns)
        dispatch(InsightsResolved(result))
