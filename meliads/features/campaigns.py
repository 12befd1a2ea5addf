"""
Campaigns Module - Campaign Management

Filter/sort toolbar, campaign table and the per-campaign detail view.
All ordering and filtering is done by core.campaign_view through the
reducer; this module only renders and dispatches.
"""

import zlib
from typing import List

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from meliads.core.campaign_view import QUICK_SORTS, SORT_FIELDS, SortDirection, StatusFilter
from meliads.core.mock_data import generate_campaign_ads, generate_campaign_history
from meliads.core.models import Campaign, CampaignStatus
from meliads.core.performance_calc import health_label
from meliads.core.state import (
    CampaignSelected,
    CampaignStatusToggled,
    FilterChanged,
    QuickSortApplied,
    SearchChanged,
    SelectionCleared,
    SortRequested,
)
from meliads.features._base import BaseFeature
from meliads.ui.session import dispatch
from meliads.utils.formatters import (
    format_currency,
    format_date,
    format_multiplier,
    format_percentage,
)

FILTER_LABELS = {
    StatusFilter.ALL: "Todas",
    StatusFilter.ACTIVE: "Ativas",
    StatusFilter.PAUSED: "Pausadas",
}

QUICK_SORT_LABELS = {
    'newest': "📅 Mais Recentes",
    'oldest': "📅 Mais Antigas",
    'revenue_desc': "💰 Mais Rentáveis (Receita)",
    'revenue_asc': "💸 Menos Rentáveis",
    'roas_desc': "📈 ROAS Mais Alto",
    'roas_asc': "📉 ROAS Mais Baixo",
    'acos_desc': "⚠️ ACOS Mais Alto (Crítico)",
    'acos_asc': "✅ ACOS Mais Baixo (Eficiente)",
}

COLUMN_LABELS = {
    'name': "Campanha",
    'status': "Status",
    'spend': "Investimento",
    'revenue': "Receita",
    'acos': "ACOS",
    'roas': "ROAS",
}

STATUS_BADGES = {
    CampaignStatus.ACTIVE: "🟢 ACTIVE",
    CampaignStatus.PAUSED: "🟡 PAUSED",
    CampaignStatus.ENDED: "⚪ ENDED",
}


def campaign_table(campaigns: List[Campaign]) -> pd.DataFrame:
    """Formatted rows for st.dataframe."""
    return pd.DataFrame([
        {
            "ID": c.id,
            "Campanha": c.name,
            "Início": format_date(c.start_date),
            "Status": STATUS_BADGES[c.status],
            "Investimento": format_currency(c.spend),
            "Receita": format_currency(c.revenue),
            "ACOS": format_percentage(c.acos),
            "ROAS": format_multiplier(c.roas),
            "Saúde": health_label(c),
        }
        for c in campaigns
    ])


class CampaignsFeature(BaseFeature):
    """Gerenciamento de Campanhas screen."""

    def render_ui(self):
        selected = self.state.selected_campaign
        if selected is not None:
            CampaignDetailFeature(self.state, selected).run()
            return

        self.render_header("Gerenciamento de Campanhas", "Gerencie e analise todas as suas campanhas ativas.")
        self._render_toolbar()

        rows = self.state.visible_campaigns
        if not rows:
            st.info("Nenhuma campanha encontrada com os filtros selecionados.")
            return

        st.dataframe(campaign_table(rows), use_container_width=True, hide_index=True)

        options = {c.id: f"{c.id} · {c.name}" for c in rows}
        col_a, col_b = st.columns([4, 1])
        with col_a:
            chosen = st.selectbox("Abrir campanha", list(options), format_func=options.get,
                                  label_visibility="collapsed")
        with col_b:
            if st.button("Ver detalhes", use_container_width=True):
                dispatch(CampaignSelected(chosen))

    def _render_toolbar(self):
        # Widget callbacks run before the rerun, so they dispatch without one
        state = self.state
        search_col, filter_col, sort_col, order_col = st.columns([3, 3, 3, 2])

        with search_col:
            st.text_input(
                "Buscar campanha...", value=state.search_query, key="campaign_search",
                placeholder="Buscar campanha...", label_visibility="collapsed",
                on_change=lambda: dispatch(SearchChanged(st.session_state["campaign_search"]), rerun=False),
            )

        with filter_col:
            filters = list(FILTER_LABELS)
            st.radio(
                "Status", filters, index=filters.index(state.status_filter), key="status_filter",
                format_func=FILTER_LABELS.get, horizontal=True, label_visibility="collapsed",
                on_change=lambda: dispatch(FilterChanged(st.session_state["status_filter"]), rerun=False),
            )

        with sort_col:
            st.selectbox(
                "Ordenação rápida", ["default"] + list(QUICK_SORTS), key="quick_sort",
                format_func=lambda p: QUICK_SORT_LABELS.get(p, "Selecione um indicador..."),
                label_visibility="collapsed",
                on_change=self._apply_quick_sort,
            )

        with order_col:
            current = state.sort_config
            sortable = [k for k in COLUMN_LABELS if k in SORT_FIELDS]
            index = sortable.index(current.key) if current.key in sortable else 0
            key = st.selectbox("Ordenar por", sortable, index=index, format_func=COLUMN_LABELS.get,
                               label_visibility="collapsed", key="sort_column")
            arrow = "↑" if current.direction == SortDirection.ASC else "↓"
            label = COLUMN_LABELS.get(current.key, current.key)
            if st.button(f"{label} {arrow}", use_container_width=True):
                dispatch(SortRequested(key))

    @staticmethod
    def _apply_quick_sort():
        preset = st.session_state["quick_sort"]
        if preset in QUICK_SORTS:
            dispatch(QuickSortApplied(preset), rerun=False)
            # Back to the placeholder so picking the same preset again fires on_change
            st.session_state["quick_sort"] = "default"


class CampaignDetailFeature(BaseFeature):
    """Detail view for a single campaign."""

    def __init__(self, state, campaign: Campaign):
        super().__init__(state)
        self.campaign = campaign

    def render_ui(self):
        campaign = self.campaign

        if st.button("← Voltar"):
            dispatch(SelectionCleared())

        head, actions = st.columns([3, 1])
        with head:
            st.title(campaign.name)
            st.caption(f"{STATUS_BADGES[campaign.status]} · ID: {campaign.id} · "
                       f"Início: {format_date(campaign.start_date)}")
        with actions:
            if campaign.status != CampaignStatus.ENDED:
                toggle_label = "⏸️ Pausar" if campaign.status == CampaignStatus.ACTIVE else "▶️ Ativar"
                if st.button(toggle_label, use_container_width=True):
                    dispatch(CampaignStatusToggled(campaign.id))

        m1, m2, m3, m4 = st.columns(4)
        m1.metric("Investimento", format_currency(campaign.spend), delta="-5%", delta_color="inverse")
        m2.metric("Receita", format_currency(campaign.revenue), delta="+12%")
        m3.metric("ROAS", format_multiplier(campaign.roas), delta="+2.4%")
        m4.metric("ACOS", format_percentage(campaign.acos), delta="-1.5%", delta_color="inverse")

        history = generate_campaign_history(campaign, seed=zlib.crc32(campaign.id.encode()))
        fig = go.Figure()
        fig.add_trace(go.Scatter(x=history['date'], y=history['revenue'], name="Receita",
                                 fill='tozeroy', line=dict(color="#3b82f6")))
        fig.add_trace(go.Scatter(x=history['date'], y=history['spend'], name="Investimento",
                                 fill='tozeroy', line=dict(color="#ffe600")))
        fig.update_layout(height=320, margin=dict(t=10, r=30, l=0, b=0))
        st.markdown("### Desempenho Diário")
        st.plotly_chart(fig, use_container_width=True)

        tab_ads, tab_keywords, tab_settings = st.tabs(["Anúncios", "Palavras-chave", "Configurações"])
        with tab_ads:
            ads = pd.DataFrame(generate_campaign_ads(campaign))
            ads['price'] = ads['price'].map(format_currency)
            ads['acos'] = ads['acos'].map(format_percentage)
            ads.columns = ["ID", "Anúncio", "Preço", "Status", "Vendidos", "ACOS"]
            st.dataframe(ads, use_container_width=True, hide_index=True)
        with tab_keywords:
            st.info("Relatório de palavras-chave disponível após a sincronização da conta.")
        with tab_settings:
            st.metric("Orçamento Diário", format_currency(campaign.daily_budget))
            st.metric("CTR", format_percentage(campaign.ctr))
            st.metric("Taxa de Conversão", format_percentage(campaign.conversion_rate))
