"""
Dashboard Module - Account Overview

KPI cards, top-spender charts and the attention panel for critical ACOS.
"""

import plotly.express as px
import plotly.graph_objects as go
import streamlit as st

from meliads.core.models import ViewState
from meliads.core.performance_calc import (
    CRITICAL_ACOS_THRESHOLD,
    count_critical,
    critical_campaigns,
    summarize_campaigns,
    top_spenders_frame,
)
from meliads.core.state import ViewChanged
from meliads.features._base import BaseFeature
from meliads.ui.session import dispatch
from meliads.utils.formatters import format_count, format_currency, format_percentage

REVENUE_COLOR = "#3b82f6"
SPEND_COLOR = "#ffe600"
ACOS_COLOR = "#10b981"

# Period-over-period deltas are not tracked yet; these mirror the mock period
KPI_TRENDS = {
    'revenue': 12.5,
    'spend': -2.4,
    'acos': -5.1,
    'clicks': 8.2,
}


class DashboardFeature(BaseFeature):
    """Visão Geral screen."""

    def render_ui(self):
        campaigns = list(self.state.campaigns)
        summary = summarize_campaigns(campaigns)

        head, actions = st.columns([3, 2])
        with head:
            self.render_header("Visão Geral", "Performance da sua conta nos últimos 30 dias.")
        with actions:
            b1, b2 = st.columns(2)
            if b1.button("Gerenciar Campanhas", use_container_width=True):
                dispatch(ViewChanged(ViewState.CAMPAIGNS))
            if b2.button("🧠 Insights IA", type="primary", use_container_width=True):
                dispatch(ViewChanged(ViewState.OPTIMIZATION))

        # KPI cards
        c1, c2, c3, c4 = st.columns(4)
        c1.metric("Receita de Vendas", format_currency(summary.total_revenue),
                  delta=f"{KPI_TRENDS['revenue']:+.1f}%")
        c2.metric("Investimento (Ads)", format_currency(summary.total_spend),
                  delta=f"{KPI_TRENDS['spend']:+.1f}%", delta_color="inverse")
        c3.metric("ACOS Global", format_percentage(summary.global_acos),
                  delta=f"{KPI_TRENDS['acos']:+.1f}%", delta_color="inverse")
        c4.metric("Total de Cliques", format_count(summary.total_clicks),
                  delta=f"{KPI_TRENDS['clicks']:+.1f}%")

        st.divider()

        chart_df = top_spenders_frame(campaigns)
        left, right = st.columns([2, 1])

        with left:
            st.markdown("### Investimento vs. Receita (Top Campanhas)")
            fig = go.Figure()
            fig.add_trace(go.Bar(x=chart_df['name'], y=chart_df['revenue'], name="Receita",
                                 marker_color=REVENUE_COLOR))
            fig.add_trace(go.Bar(x=chart_df['name'], y=chart_df['spend'], name="Investimento",
                                 marker_color=SPEND_COLOR))
            fig.update_layout(barmode='group', height=360, margin=dict(t=20, r=30, l=20, b=5),
                              yaxis_tickprefix="R$")
            st.plotly_chart(fig, use_container_width=True)

        with right:
            st.markdown("### Eficiência (ACOS)")
            st.caption("Campanhas com menor custo de venda.")
            acos_df = chart_df.sort_values('acos', kind='stable')
            line_fig = px.line(acos_df, x='name', y='acos', markers=True,
                               labels={'name': '', 'acos': 'ACOS %'})
            line_fig.update_traces(line_color=ACOS_COLOR, line_width=3)
            line_fig.update_layout(height=300, margin=dict(t=10, r=10, l=10, b=10))
            st.plotly_chart(line_fig, use_container_width=True)

        self._render_attention_panel(count_critical(campaigns), critical_campaigns(campaigns))

    def _render_attention_panel(self, critical: int, flagged):
        threshold = int(CRITICAL_ACOS_THRESHOLD)
        with st.container(border=True):
            st.markdown("#### ⚠️ Atenção Necessária")
            st.markdown(
                f"Detectamos **{critical} campanhas** com ACOS acima de {threshold}% "
                "consumindo recursos sem retorno adequado."
            )
            if flagged:
                st.caption(", ".join(f"{c.name} ({format_percentage(c.acos)})" for c in flagged))
            if st.button("Ver campanhas problemáticas"):
                dispatch(ViewChanged(ViewState.CAMPAIGNS))
