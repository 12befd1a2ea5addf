"""
Shared Ad Metrics Calculation Utilities

Standardized ratio calculations used by the campaign model, the dashboard
summary and the chart frames, so every screen agrees on the same numbers.

Conventions:
    - ACOS, CTR and conversion rate are percentages (5.0 = 5%)
    - ROAS is a multiplier (2.5 = 2.5x)
    - A zero divisor yields 0, never an exception
"""

import numpy as np
import pandas as pd


def calculate_acos(spend: float, revenue: float) -> float:
    """ACOS: spend / revenue * 100. Zero revenue (no sales yet) is a valid state."""
    if revenue > 0:
        return spend / revenue * 100
    return 0.0


def calculate_roas(spend: float, revenue: float) -> float:
    """ROAS: revenue / spend."""
    if spend > 0:
        return revenue / spend
    return 0.0


def calculate_ctr(clicks: int, impressions: int) -> float:
    """CTR: clicks / impressions * 100."""
    if impressions > 0:
        return clicks / impressions * 100
    return 0.0


def calculate_conversion_rate(orders: int, clicks: int) -> float:
    """Conversion rate: orders / clicks * 100."""
    if clicks > 0:
        return orders / clicks * 100
    return 0.0


def calculate_ad_metrics(df: pd.DataFrame, inplace: bool = True) -> pd.DataFrame:
    """
    Calculate standard ad metrics on a frame: ACOS, ROAS, CTR, CONV_RATE.

    Args:
        df: DataFrame with spend, revenue, clicks, impressions and orders columns
        inplace: If False, returns a copy. If True, modifies df directly.

    Returns:
        DataFrame with acos, roas, ctr and conversion_rate columns added
    """
    if not inplace:
        df = df.copy()

    df['acos'] = np.where(df['revenue'] > 0, df['spend'] / df['revenue'].where(df['revenue'] > 0) * 100, 0.0)
    df['roas'] = np.where(df['spend'] > 0, df['revenue'] / df['spend'].where(df['spend'] > 0), 0.0)
    df['ctr'] = np.where(
        df['impressions'] > 0,
        df['clicks'] / df['impressions'].where(df['impressions'] > 0) * 100,
        0.0
    )

    if 'orders' in df.columns:
        df['conversion_rate'] = np.where(
            df['clicks'] > 0,
            df['orders'] / df['clicks'].where(df['clicks'] > 0) * 100,
            0.0
        )

    return df
