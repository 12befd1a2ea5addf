"""
Performance Metrics Calculation

All account totals, global ACOS/ROAS and dashboard chart frames live here.
Every function is a pure function of the campaign list it receives.
"""

from typing import Iterable, List, Sequence

import pandas as pd

from meliads.core.models import Campaign, MetricSummary
from meliads.utils.metrics import calculate_acos, calculate_ad_metrics, calculate_roas

# Campaigns above this ACOS are flagged on the dashboard and in the table
CRITICAL_ACOS_THRESHOLD = 40.0
# ROAS above this is shown as a top performer
STAR_ROAS_THRESHOLD = 8.0

CHART_LABEL_LENGTH = 15

FRAME_COLUMNS = [
    'id', 'name', 'status', 'start_date', 'daily_budget',
    'spend', 'revenue', 'clicks', 'impressions', 'orders',
]


def summarize_campaigns(campaigns: Iterable[Campaign]) -> MetricSummary:
    """
    Aggregate totals and global ratios for a list of campaigns.

    Global ACOS is computed from the totals, not averaged, and is 0 when
    total revenue is 0 whatever the spend.

    Args:
        campaigns: Campaign records (any iterable, consumed once)

    Returns:
        MetricSummary
    """
    campaigns = list(campaigns)

    total_spend = sum(c.spend for c in campaigns)
    total_revenue = sum(c.revenue for c in campaigns)
    total_clicks = sum(c.clicks for c in campaigns)
    total_impressions = sum(c.impressions for c in campaigns)

    if campaigns:
        average_acos = sum(c.acos for c in campaigns) / len(campaigns)
        average_roas = sum(c.roas for c in campaigns) / len(campaigns)
    else:
        average_acos = average_roas = 0.0

    return MetricSummary(
        total_spend=total_spend,
        total_revenue=total_revenue,
        total_clicks=total_clicks,
        total_impressions=total_impressions,
        global_acos=calculate_acos(total_spend, total_revenue),
        global_roas=calculate_roas(total_spend, total_revenue),
        average_acos=average_acos,
        average_roas=average_roas,
    )


def campaigns_to_frame(campaigns: Sequence[Campaign]) -> pd.DataFrame:
    """
    One row per campaign with the derived ratio columns added.

    Returns an empty frame with the expected columns for an empty list.
    """
    rows = [
        {
            'id': c.id,
            'name': c.name,
            'status': c.status.value,
            'start_date': c.start_date,
            'daily_budget': float(c.daily_budget),
            'spend': float(c.spend),
            'revenue': float(c.revenue),
            'clicks': int(c.clicks),
            'impressions': int(c.impressions),
            'orders': int(c.orders),
        }
        for c in campaigns
    ]
    df = pd.DataFrame(rows, columns=FRAME_COLUMNS)
    return calculate_ad_metrics(df)


def truncate_label(name: str, length: int = CHART_LABEL_LENGTH) -> str:
    """Shorten long campaign names for chart axes."""
    if len(name) > length:
        return name[:length] + '...'
    return name


def top_spenders_frame(campaigns: Sequence[Campaign], limit: int = 5) -> pd.DataFrame:
    """
    Chart data for the dashboard: the biggest spenders first.

    Args:
        campaigns: Campaign records
        limit: Number of rows to keep

    Returns:
        DataFrame with name (truncated), spend, revenue, acos
    """
    df = campaigns_to_frame(campaigns)
    df['name'] = df['name'].map(truncate_label)
    df = df.sort_values('spend', ascending=False, kind='stable').head(limit)
    return df[['name', 'spend', 'revenue', 'acos']].reset_index(drop=True)


def count_critical(campaigns: Iterable[Campaign], threshold: float = CRITICAL_ACOS_THRESHOLD) -> int:
    """Number of campaigns whose ACOS is above the threshold."""
    return sum(1 for c in campaigns if c.acos > threshold)


def critical_campaigns(campaigns: Iterable[Campaign], threshold: float = CRITICAL_ACOS_THRESHOLD) -> List[Campaign]:
    return [c for c in campaigns if c.acos > threshold]


def health_label(campaign: Campaign) -> str:
    """Row badge for the campaign table."""
    if campaign.acos > CRITICAL_ACOS_THRESHOLD:
        return "Crítico"
    if campaign.roas > STAR_ROAS_THRESHOLD:
        return "Ótimo"
    return "Estável"
