import unittest
from datetime import date

import pytest

from meliads.core.campaign_view import (
    DEFAULT_SORT,
    QUICK_SORTS,
    SORT_FIELDS,
    SortConfig,
    SortDirection,
    StatusFilter,
    UnknownSortKey,
    apply_view,
    filter_by_status,
    search_by_name,
    sort_campaigns,
    toggle_sort,
)
from meliads.core.mock_data import generate_mock_campaigns
from meliads.core.models import CampaignStatus


def ids(campaigns):
    return [c.id for c in campaigns]


class TestCampaignView(unittest.TestCase):

    def setUp(self):
        self.campaigns = generate_mock_campaigns(today=date(2025, 6, 1))

    def test_default_sort_is_spend_descending(self):
        result = apply_view(self.campaigns)
        self.assertEqual(DEFAULT_SORT, SortConfig('spend', SortDirection.DESC))
        self.assertEqual(result[0].spend, 6000)
        self.assertEqual(result[-1].spend, 100)

    def test_name_sort_is_case_insensitive(self):
        result = sort_campaigns(self.campaigns, SortConfig('name', SortDirection.ASC))
        self.assertEqual([c.name for c in result][:3],
                         ['Acessórios Automotivos', 'Beleza e Perfumaria', 'Brinquedos Educativos'])
        self.assertEqual(result[-1].name, 'Moda Verão 2024')

    def test_newest_puts_latest_start_first(self):
        result = sort_campaigns(self.campaigns, QUICK_SORTS['newest'])
        self.assertEqual(ids(result),
                         ['CMP-008', 'CMP-003', 'CMP-002', 'CMP-006', 'CMP-007', 'CMP-001', 'CMP-004', 'CMP-005'])
        oldest = sort_campaigns(self.campaigns, QUICK_SORTS['oldest'])
        self.assertEqual(ids(oldest), list(reversed(ids(result))))

    def test_acos_sort(self):
        result = sort_campaigns(self.campaigns, QUICK_SORTS['acos_desc'])
        self.assertEqual(result[0].id, 'CMP-007')
        self.assertEqual(result[-1].id, 'CMP-005')

    def test_status_filter_partitions(self):
        active = filter_by_status(self.campaigns, StatusFilter.ACTIVE)
        paused = filter_by_status(self.campaigns, StatusFilter.PAUSED)
        everything = filter_by_status(self.campaigns, StatusFilter.ALL)

        self.assertEqual(len(active), 7)
        self.assertEqual(ids(paused), ['CMP-004'])
        self.assertFalse(set(ids(active)) & set(ids(paused)))
        self.assertEqual(set(ids(active)) | set(ids(paused)), set(ids(everything)))
        self.assertTrue(all(c.status == CampaignStatus.ACTIVE for c in active))

    def test_search(self):
        self.assertEqual(ids(search_by_name(self.campaigns, 'moda')), ['CMP-003'])
        self.assertEqual(ids(search_by_name(self.campaigns, '  GAMES ')), ['CMP-005'])
        self.assertEqual(len(search_by_name(self.campaigns, '')), 8)
        self.assertEqual(search_by_name(self.campaigns, 'inexistente'), [])

    def test_input_is_not_mutated(self):
        before = list(self.campaigns)
        apply_view(self.campaigns, StatusFilter.ACTIVE, SortConfig('name', SortDirection.ASC), 'e')
        self.assertEqual(self.campaigns, before)

    def test_unknown_sort_key(self):
        with self.assertRaises(UnknownSortKey):
            sort_campaigns(self.campaigns, SortConfig('budget_per_click'))
        with self.assertRaises(KeyError):
            toggle_sort(DEFAULT_SORT, 'nope')


class TestToggleSort(unittest.TestCase):

    def test_new_column_starts_descending(self):
        self.assertEqual(toggle_sort(DEFAULT_SORT, 'roas'), SortConfig('roas', SortDirection.DESC))

    def test_second_click_flips_to_ascending(self):
        self.assertEqual(toggle_sort(SortConfig('roas', SortDirection.DESC), 'roas'),
                         SortConfig('roas', SortDirection.ASC))

    def test_third_click_returns_to_descending(self):
        self.assertEqual(toggle_sort(SortConfig('roas', SortDirection.ASC), 'roas'),
                         SortConfig('roas', SortDirection.DESC))


@pytest.mark.parametrize("key", sorted(SORT_FIELDS))
@pytest.mark.parametrize("direction", list(SortDirection))
def test_view_is_idempotent(campaigns, key, direction):
    config = SortConfig(key, direction)
    once = apply_view(campaigns, StatusFilter.ALL, config)
    twice = apply_view(once, StatusFilter.ALL, config)
    assert ids(once) == ids(twice)


@pytest.mark.parametrize("key", sorted(SORT_FIELDS))
def test_sort_is_monotonic(campaigns, key):
    result = sort_campaigns(campaigns, SortConfig(key, SortDirection.ASC))
    values = [SORT_FIELDS[key](c) for c in result]
    assert values == sorted(values)
