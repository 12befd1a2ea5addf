"""
Mock Data

Sample campaigns, linked accounts and team members used until the dashboard
is wired to the Mercado Ads API. Campaign start dates are relative to the
given day so the "newest/oldest" sorts stay meaningful.
"""

from datetime import date, datetime, timedelta
from typing import Dict, List, Optional

import numpy as np
import pandas as pd

from meliads.core.models import (
    AccountStatus,
    Campaign,
    CampaignStatus,
    LinkedAccount,
    MemberStatus,
    TeamMember,
    TeamRole,
)

# (id, name, status, daily_budget, spend, revenue, clicks, impressions, orders, days_ago)
SAMPLE_CAMPAIGNS = [
    ('CMP-001', 'Eletrônicos - Smartphones Top', CampaignStatus.ACTIVE, 250, 4500, 45000, 1200, 45000, 42, 120),
    ('CMP-002', 'Acessórios Automotivos', CampaignStatus.ACTIVE, 100, 2800, 8400, 950, 60000, 11, 45),
    ('CMP-003', 'Moda Verão 2024', CampaignStatus.ACTIVE, 50, 1200, 1500, 800, 80000, 4, 15),
    ('CMP-004', 'Casa e Decoração', CampaignStatus.PAUSED, 80, 500, 2000, 150, 12000, 3, 200),
    ('CMP-005', 'Games e Consoles', CampaignStatus.ACTIVE, 300, 6000, 120000, 2500, 95000, 125, 300),
    ('CMP-006', 'Ferramentas Profissionais', CampaignStatus.ACTIVE, 150, 3000, 6000, 1000, 50000, 10, 60),
    ('CMP-007', 'Beleza e Perfumaria', CampaignStatus.ACTIVE, 75, 2100, 1800, 1500, 120000, 4, 90),
    ('CMP-008', 'Brinquedos Educativos', CampaignStatus.ACTIVE, 60, 100, 100, 50, 5000, 0, 5),
]

HISTORY_DAYS = 14


def generate_mock_campaigns(today: Optional[date] = None) -> List[Campaign]:
    """
    Build the eight sample campaigns.

    Args:
        today: Reference day for start dates (defaults to date.today())

    Returns:
        List of Campaign records
    """
    today = today or date.today()
    return [
        Campaign(
            id=cid,
            name=name,
            status=status,
            start_date=today - timedelta(days=days_ago),
            daily_budget=float(budget),
            spend=float(spend),
            revenue=float(revenue),
            clicks=clicks,
            impressions=impressions,
            orders=orders,
        )
        for (cid, name, status, budget, spend, revenue, clicks, impressions, orders, days_ago)
        in SAMPLE_CAMPAIGNS
    ]


def default_linked_accounts(now: Optional[datetime] = None) -> List[LinkedAccount]:
    now = now or datetime.now()
    return [
        LinkedAccount(
            id='1',
            nickname='Loja Oficial Tech',
            seller_id='MLB_123456789',
            status=AccountStatus.CONNECTED,
            last_sync=now,
        ),
        LinkedAccount(
            id='2',
            nickname='Outlet Variedades',
            seller_id='MLB_987654321',
            status=AccountStatus.EXPIRED,
            last_sync=now - timedelta(days=5),
        ),
    ]


def default_team_members(now: Optional[datetime] = None) -> List[TeamMember]:
    now = now or datetime.now()
    return [
        TeamMember(
            id='1',
            name='Gestor da Conta',
            email='admin@empresa.com',
            role=TeamRole.ADMIN,
            status=MemberStatus.ACTIVE,
            added_at=datetime(2024, 1, 15),
        ),
        TeamMember(
            id='2',
            name='Analista de Mídia',
            email='analista@empresa.com',
            role=TeamRole.EDITOR,
            status=MemberStatus.ACTIVE,
            added_at=datetime(2024, 2, 10),
        ),
        TeamMember(
            id='3',
            name='Observador Externo',
            email='cliente@marca.com',
            role=TeamRole.VIEWER,
            status=MemberStatus.PENDING,
            added_at=now,
        ),
    ]


def generate_campaign_history(
    campaign: Campaign,
    days: int = HISTORY_DAYS,
    seed: Optional[int] = None,
) -> pd.DataFrame:
    """
    Simulated daily history for the campaign detail chart.

    Daily spend varies between 80% and 120% of the daily budget, daily
    revenue between 50% and 150% of a thirtieth of the campaign revenue,
    and ACOS between 10% and 30%.

    Args:
        campaign: Campaign to simulate
        days: Number of days
        seed: Random seed for reproducible charts

    Returns:
        DataFrame with date, spend, revenue, acos columns
    """
    rng = np.random.default_rng(seed)
    spend = np.floor(campaign.daily_budget * (0.8 + rng.random(days) * 0.4))
    revenue = np.floor((campaign.revenue / 30) * (0.5 + rng.random(days)))
    acos = 10 + rng.random(days) * 20

    return pd.DataFrame({
        'date': [f"Dia {i + 1}" for i in range(days)],
        'spend': spend,
        'revenue': revenue,
        'acos': acos,
    })


def generate_campaign_ads(campaign: Campaign) -> List[Dict]:
    """Listings advertised by the campaign, shown on the detail view."""
    return [
        {
            'id': 'MLB-1001',
            'title': f"{campaign.name} - Item Premium V1",
            'price': 129.90,
            'status': 'ACTIVE',
            'sold': 45,
            'acos': campaign.acos - 2,
        },
        {
            'id': 'MLB-1002',
            'title': f"{campaign.name} - Item Standard",
            'price': 89.90,
            'status': 'PAUSED',
            'sold': 12,
            'acos': campaign.acos + 5,
        },
        {
            'id': 'MLB-1003',
            'title': f"{campaign.name} - Kit Completo",
            'price': 299.90,
            'status': 'ACTIVE',
            'sold': 8,
            'acos': campaign.acos - 5,
        },
    ]
