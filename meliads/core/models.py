"""
Domain Models
=============
Data models for campaigns and the supporting display records.

Campaign stores only volumes. ACOS, ROAS, CTR and conversion rate are
properties computed from those volumes on every read, so a record built with
dataclasses.replace(campaign, spend=...) can never carry stale ratios.
"""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

from meliads.utils.metrics import (
    calculate_acos,
    calculate_conversion_rate,
    calculate_ctr,
    calculate_roas,
)


class CampaignStatus(str, Enum):
    ACTIVE = "ACTIVE"
    PAUSED = "PAUSED"
    ENDED = "ENDED"


class AccountStatus(str, Enum):
    CONNECTED = "CONNECTED"
    EXPIRED = "EXPIRED"
    ERROR = "ERROR"


class TeamRole(str, Enum):
    ADMIN = "ADMIN"
    EDITOR = "EDITOR"
    VIEWER = "VIEWER"


class MemberStatus(str, Enum):
    ACTIVE = "ACTIVE"
    PENDING = "PENDING"


class ViewState(str, Enum):
    """Top-level screens reachable from the sidebar."""
    DASHBOARD = "DASHBOARD"
    CAMPAIGNS = "CAMPAIGNS"
    OPTIMIZATION = "OPTIMIZATION"
    INTEGRATIONS = "INTEGRATIONS"
    TEAM = "TEAM"


class InsightsStatus(str, Enum):
    """Lifecycle of the AI report request."""
    IDLE = "IDLE"
    IN_FLIGHT = "IN_FLIGHT"
    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"


@dataclass(frozen=True)
class InsightsResult:
    """Outcome of one insights request. text is always displayable."""
    status: InsightsStatus
    text: str

    @property
    def ok(self) -> bool:
        return self.status == InsightsStatus.SUCCEEDED


@dataclass(frozen=True)
class Campaign:
    """
    A Mercado Ads campaign with its accumulated volumes.

    Monetary values are in BRL.
    """
    id: str
    name: str
    status: CampaignStatus
    start_date: date
    daily_budget: float
    spend: float
    revenue: float
    clicks: int
    impressions: int
    orders: int = 0

    @property
    def acos(self) -> float:
        """Advertising Cost of Sales, in percent."""
        return calculate_acos(self.spend, self.revenue)

    @property
    def roas(self) -> float:
        """Return on Ad Spend, as a multiplier."""
        return calculate_roas(self.spend, self.revenue)

    @property
    def ctr(self) -> float:
        return calculate_ctr(self.clicks, self.impressions)

    @property
    def conversion_rate(self) -> float:
        return calculate_conversion_rate(self.orders, self.clicks)


@dataclass(frozen=True)
class MetricSummary:
    """Account-level totals and ratios shown on the dashboard KPI cards."""
    total_spend: float
    total_revenue: float
    total_clicks: int
    total_impressions: int
    global_acos: float
    global_roas: float
    average_acos: float
    average_roas: float


@dataclass(frozen=True)
class LinkedAccount:
    """A Mercado Livre seller account connected through OAuth."""
    id: str
    nickname: str
    seller_id: str
    status: AccountStatus
    last_sync: datetime


@dataclass(frozen=True)
class User:
    email: str
    name: str


@dataclass(frozen=True)
class TeamMember:
    id: str
    name: str
    email: str
    role: TeamRole
    status: MemberStatus
    added_at: datetime
