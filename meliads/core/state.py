"""
Application State
=================
Single state record for the whole dashboard plus the pure reducer that
produces the next state from an action.

The Streamlit layer keeps one AppState in st.session_state and only ever
replaces it with reduce(state, action). Views read from the state; they
never mutate it.

Rules:
- Leaving the CAMPAIGNS view clears the selected campaign
- Signing out clears user and selection and returns to the DASHBOARD
- Only one insights request may be in flight; re-requests are ignored
- A resolution that arrives when nothing is in flight is ignored
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import List, Optional, Tuple

from meliads.core import account_management, team
from meliads.core.campaign_view import (
    DEFAULT_SORT,
    QUICK_SORTS,
    SortConfig,
    StatusFilter,
    apply_view,
    toggle_sort,
)
from meliads.core.models import (
    Campaign,
    CampaignStatus,
    InsightsResult,
    InsightsStatus,
    LinkedAccount,
    TeamMember,
    User,
    ViewState,
)


# =============================================================================
# STATE
# =============================================================================

@dataclass(frozen=True)
class InsightsTask:
    """Read-only view of the AI report request for the optimization screen."""
    status: InsightsStatus = InsightsStatus.IDLE
    report: Optional[str] = None

    @property
    def busy(self) -> bool:
        return self.status == InsightsStatus.IN_FLIGHT


@dataclass(frozen=True)
class AppState:
    user: Optional[User] = None
    current_view: ViewState = ViewState.DASHBOARD
    selected_campaign_id: Optional[str] = None
    campaigns: Tuple[Campaign, ...] = ()
    accounts: Tuple[LinkedAccount, ...] = ()
    members: Tuple[TeamMember, ...] = ()
    status_filter: StatusFilter = StatusFilter.ALL
    sort_config: SortConfig = DEFAULT_SORT
    search_query: str = ''
    insights: InsightsTask = field(default_factory=InsightsTask)

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    @property
    def selected_campaign(self) -> Optional[Campaign]:
        if self.selected_campaign_id is None:
            return None
        for campaign in self.campaigns:
            if campaign.id == self.selected_campaign_id:
                return campaign
        return None

    @property
    def visible_campaigns(self) -> List[Campaign]:
        """Campaign table rows after filter, search and sort."""
        return apply_view(self.campaigns, self.status_filter, self.sort_config, self.search_query)


def initial_state(
    campaigns=(),
    accounts=(),
    members=(),
) -> AppState:
    return AppState(
        campaigns=tuple(campaigns),
        accounts=tuple(accounts),
        members=tuple(members),
    )


# =============================================================================
# ACTIONS
# =============================================================================

@dataclass(frozen=True)
class SignedIn:
    user: User


@dataclass(frozen=True)
class SignedOut:
    pass


@dataclass(frozen=True)
class ViewChanged:
    view: ViewState


@dataclass(frozen=True)
class CampaignSelected:
    campaign_id: str


@dataclass(frozen=True)
class SelectionCleared:
    pass


@dataclass(frozen=True)
class CampaignStatusToggled:
    campaign_id: str


@dataclass(frozen=True)
class FilterChanged:
    status_filter: StatusFilter


@dataclass(frozen=True)
class SortRequested:
    key: str


@dataclass(frozen=True)
class QuickSortApplied:
    preset: str


@dataclass(frozen=True)
class SearchChanged:
    query: str


@dataclass(frozen=True)
class InsightsRequested:
    pass


@dataclass(frozen=True)
class InsightsResolved:
    result: InsightsResult


@dataclass(frozen=True)
class AccountConnected:
    account: LinkedAccount


@dataclass(frozen=True)
class AccountDisconnected:
    account_id: str


@dataclass(frozen=True)
class AccountRefreshed:
    account_id: str
    synced_at: datetime


@dataclass(frozen=True)
class MemberAdded:
    member: TeamMember


@dataclass(frozen=True)
class MemberRemoved:
    member_id: str


# =============================================================================
# REDUCER
# =============================================================================

def _toggle_status(campaign: Campaign) -> Campaign:
    if campaign.status == CampaignStatus.ACTIVE:
        return replace(campaign, status=CampaignStatus.PAUSED)
    if campaign.status == CampaignStatus.PAUSED:
        return replace(campaign, status=CampaignStatus.ACTIVE)
    return campaign


def reduce(state: AppState, action) -> AppState:
    """
    Return the state that follows `action`.

    Raises:
        KeyError: Unknown quick-sort preset or sort key
        AccountNotFound / MemberNotFound: Unknown ids
        TypeError: Unknown action type
    """
    if isinstance(action, SignedIn):
        return replace(state, user=action.user)

    elif isinstance(action, SignedOut):
        return replace(
            state,
            user=None,
            current_view=ViewState.DASHBOARD,
            selected_campaign_id=None,
        )

    elif isinstance(action, ViewChanged):
        view = ViewState(action.view)
        selected = state.selected_campaign_id if view == ViewState.CAMPAIGNS else None
        return replace(state, current_view=view, selected_campaign_id=selected)

    elif isinstance(action, CampaignSelected):
        return replace(
            state,
            current_view=ViewState.CAMPAIGNS,
            selected_campaign_id=action.campaign_id,
        )

    elif isinstance(action, SelectionCleared):
        return replace(state, selected_campaign_id=None)

    elif isinstance(action, CampaignStatusToggled):
        campaigns = tuple(
            _toggle_status(c) if c.id == action.campaign_id else c
            for c in state.campaigns
        )
        return replace(state, campaigns=campaigns)

    elif isinstance(action, FilterChanged):
        return replace(state, status_filter=StatusFilter(action.status_filter))

    elif isinstance(action, SortRequested):
        return replace(state, sort_config=toggle_sort(state.sort_config, action.key))

    elif isinstance(action, QuickSortApplied):
        return replace(state, sort_config=QUICK_SORTS[action.preset])

    elif isinstance(action, SearchChanged):
        return replace(state, search_query=action.query)

    elif isinstance(action, InsightsRequested):
        if state.insights.busy:
            return state
        # Keep the previous report until the new one arrives
        task = InsightsTask(status=InsightsStatus.IN_FLIGHT, report=state.insights.report)
        return replace(state, insights=task)

    elif isinstance(action, InsightsResolved):
        if not state.insights.busy:
            return state
        task = InsightsTask(status=action.result.status, report=action.result.text)
        return replace(state, insights=task)

    elif isinstance(action, AccountConnected):
        return replace(state, accounts=state.accounts + (action.account,))

    elif isinstance(action, AccountDisconnected):
        accounts = account_management.disconnect_account(state.accounts, action.account_id)
        return replace(state, accounts=accounts)

    elif isinstance(action, AccountRefreshed):
        accounts = account_management.refresh_account(state.accounts, action.account_id, action.synced_at)
        return replace(state, accounts=accounts)

    elif isinstance(action, MemberAdded):
        return replace(state, members=state.members + (action.member,))

    elif isinstance(action, MemberRemoved):
        members = team.remove_member(state.members, action.member_id)
        return replace(state, members=members)

    raise TypeError(f"Unknown action: {action!r}")
