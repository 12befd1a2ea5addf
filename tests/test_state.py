import unittest
from datetime import date, datetime

from meliads.core.account_management import AccountNotFound, connect_account
from meliads.core.campaign_view import SortConfig, SortDirection, StatusFilter
from meliads.core.mock_data import default_linked_accounts, default_team_members, generate_mock_campaigns
from meliads.core.models import (
    AccountStatus,
    CampaignStatus,
    InsightsResult,
    InsightsStatus,
    User,
    ViewState,
)
from meliads.core.state import (
    AccountConnected,
    AccountDisconnected,
    AccountRefreshed,
    CampaignSelected,
    CampaignStatusToggled,
    FilterChanged,
    InsightsRequested,
    InsightsResolved,
    MemberAdded,
    MemberRemoved,
    QuickSortApplied,
    SearchChanged,
    SelectionCleared,
    SignedIn,
    SignedOut,
    SortRequested,
    ViewChanged,
    initial_state,
    reduce,
)
from meliads.core.team import MemberNotFound, add_member

NOW = datetime(2025, 6, 1, 12, 0, 0)


class TestReducer(unittest.TestCase):

    def setUp(self):
        self.state = initial_state(
            campaigns=generate_mock_campaigns(today=date(2025, 6, 1)),
            accounts=default_linked_accounts(NOW),
            members=default_team_members(NOW),
        )
        self.user = User(email='gestor@loja.com', name='Gestor da Conta')

    def test_initial_state(self):
        self.assertFalse(self.state.is_authenticated)
        self.assertEqual(self.state.current_view, ViewState.DASHBOARD)
        self.assertIsNone(self.state.selected_campaign)
        self.assertEqual(self.state.insights.status, InsightsStatus.IDLE)
        self.assertEqual(len(self.state.campaigns), 8)

    def test_sign_in_and_out(self):
        state = reduce(self.state, SignedIn(self.user))
        self.assertTrue(state.is_authenticated)

        state = reduce(state, CampaignSelected('CMP-002'))
        state = reduce(state, SignedOut())
        self.assertIsNone(state.user)
        self.assertEqual(state.current_view, ViewState.DASHBOARD)
        self.assertIsNone(state.selected_campaign_id)

    def test_select_campaign_opens_campaigns_view(self):
        state = reduce(self.state, CampaignSelected('CMP-005'))
        self.assertEqual(state.current_view, ViewState.CAMPAIGNS)
        self.assertEqual(state.selected_campaign.name, 'Games e Consoles')

        state = reduce(state, SelectionCleared())
        self.assertIsNone(state.selected_campaign)
        self.assertEqual(state.current_view, ViewState.CAMPAIGNS)

    def test_leaving_campaigns_clears_selection(self):
        state = reduce(self.state, CampaignSelected('CMP-005'))
        state = reduce(state, ViewChanged(ViewState.CAMPAIGNS))
        self.assertEqual(state.selected_campaign_id, 'CMP-005')

        state = reduce(state, ViewChanged(ViewState.TEAM))
        self.assertEqual(state.current_view, ViewState.TEAM)
        self.assertIsNone(state.selected_campaign_id)

    def test_toggle_status(self):
        state = reduce(self.state, CampaignStatusToggled('CMP-001'))
        self.assertEqual(state.campaigns[0].status, CampaignStatus.PAUSED)
        state = reduce(state, CampaignStatusToggled('CMP-001'))
        self.assertEqual(state.campaigns[0].status, CampaignStatus.ACTIVE)
        # Original state untouched
        self.assertEqual(self.state.campaigns[0].status, CampaignStatus.ACTIVE)

    def test_visible_campaigns_follow_filter_sort_and_search(self):
        state = reduce(self.state, FilterChanged(StatusFilter.PAUSED))
        self.assertEqual([c.id for c in state.visible_campaigns], ['CMP-004'])

        state = reduce(self.state, SearchChanged('bri'))
        self.assertEqual([c.id for c in state.visible_campaigns], ['CMP-008'])

        state = reduce(self.state, QuickSortApplied('roas_desc'))
        self.assertEqual(state.sort_config, SortConfig('roas', SortDirection.DESC))
        self.assertEqual(state.visible_campaigns[0].id, 'CMP-005')

    def test_sort_requested_toggles(self):
        state = reduce(self.state, SortRequested('spend'))
        self.assertEqual(state.sort_config, SortConfig('spend', SortDirection.ASC))
        state = reduce(state, SortRequested('name'))
        self.assertEqual(state.sort_config, SortConfig('name', SortDirection.DESC))

    def test_unknown_quick_sort(self):
        with self.assertRaises(KeyError):
            reduce(self.state, QuickSortApplied('cheapest'))

    def test_unknown_action(self):
        with self.assertRaises(TypeError):
            reduce(self.state, object())


class TestInsightsLifecycle(unittest.TestCase):

    def setUp(self):
        self.state = initial_state()

    def test_request_then_resolve(self):
        state = reduce(self.state, InsightsRequested())
        self.assertTrue(state.insights.busy)

        state = reduce(state, InsightsResolved(InsightsResult(InsightsStatus.SUCCEEDED, "# Relatório")))
        self.assertFalse(state.insights.busy)
        self.assertEqual(state.insights.status, InsightsStatus.SUCCEEDED)
        self.assertEqual(state.insights.report, "# Relatório")

    def test_second_request_while_busy_is_ignored(self):
        busy = reduce(self.state, InsightsRequested())
        self.assertIs(reduce(busy, InsightsRequested()), busy)

    def test_resolution_without_request_is_ignored(self):
        result = InsightsResult(InsightsStatus.SUCCEEDED, "tarde demais")
        self.assertIs(reduce(self.state, InsightsResolved(result)), self.state)

    def test_refresh_keeps_previous_report_until_resolved(self):
        state = reduce(self.state, InsightsRequested())
        state = reduce(state, InsightsResolved(InsightsResult(InsightsStatus.SUCCEEDED, "v1")))
        state = reduce(state, InsightsRequested())
        self.assertTrue(state.insights.busy)
        self.assertEqual(state.insights.report, "v1")

        state = reduce(state, InsightsResolved(InsightsResult(InsightsStatus.FAILED, "erro")))
        self.assertEqual(state.insights.status, InsightsStatus.FAILED)
        self.assertEqual(state.insights.report, "erro")


class TestAccountAndTeamActions(unittest.TestCase):

    def setUp(self):
        self.state = initial_state(
            accounts=default_linked_accounts(NOW),
            members=default_team_members(NOW),
        )

    def test_account_actions(self):
        new = connect_account(self.state.accounts, now=NOW)[-1]
        state = reduce(self.state, AccountConnected(new))
        self.assertEqual(len(state.accounts), 3)

        later = datetime(2025, 6, 2, 8, 0, 0)
        state = reduce(state, AccountRefreshed('2', later))
        refreshed = next(a for a in state.accounts if a.id == '2')
        self.assertEqual(refreshed.status, AccountStatus.CONNECTED)
        self.assertEqual(refreshed.last_sync, later)

        state = reduce(state, AccountDisconnected('1'))
        self.assertNotIn('1', [a.id for a in state.accounts])

        with self.assertRaises(AccountNotFound):
            reduce(state, AccountDisconnected('1'))

    def test_member_actions(self):
        member = add_member(self.state.members, 'novo@empresa.com', now=NOW)[-1]
        state = reduce(self.state, MemberAdded(member))
        self.assertEqual(state.members[-1].email, 'novo@empresa.com')

        state = reduce(state, MemberRemoved(member.id))
        self.assertEqual(len(state.members), 3)

        with self.assertRaises(MemberNotFound):
            reduce(state, MemberRemoved(member.id))


if __name__ == '__main__':
    unittest.main()
