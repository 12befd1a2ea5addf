"""
Campaign Table View Logic

Status filter, name search and sorting for the campaign table.

Sorting goes through SORT_FIELDS, an explicit table of sort-key functions,
one per sortable column. Each entry states how its column orders:
case-folded text, status value, calendar date or number. Python's sort is
stable, so ties keep their input order and re-applying the same view to its
own output returns the same list.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List

from meliads.core.models import Campaign


class StatusFilter(str, Enum):
    ALL = "ALL"
    ACTIVE = "ACTIVE"
    PAUSED = "PAUSED"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class UnknownSortKey(KeyError):
    """Raised when a sort key has no entry in SORT_FIELDS."""
    pass


@dataclass(frozen=True)
class SortConfig:
    key: str
    direction: SortDirection = SortDirection.DESC


SORT_FIELDS: Dict[str, Callable[[Campaign], Any]] = {
    # Text
    'name': lambda c: c.name.casefold(),
    'status': lambda c: c.status.value,
    # Dates
    'start_date': lambda c: c.start_date,
    # Numbers
    'daily_budget': lambda c: float(c.daily_budget),
    'spend': lambda c: float(c.spend),
    'revenue': lambda c: float(c.revenue),
    'clicks': lambda c: int(c.clicks),
    'impressions': lambda c: int(c.impressions),
    'orders': lambda c: int(c.orders),
    'acos': lambda c: c.acos,
    'roas': lambda c: c.roas,
    'ctr': lambda c: c.ctr,
    'conversion_rate': lambda c: c.conversion_rate,
}

DEFAULT_SORT = SortConfig('spend', SortDirection.DESC)

# "Smart sort" dropdown presets
QUICK_SORTS: Dict[str, SortConfig] = {
    'newest': SortConfig('start_date', SortDirection.DESC),
    'oldest': SortConfig('start_date', SortDirection.ASC),
    'revenue_desc': SortConfig('revenue', SortDirection.DESC),
    'revenue_asc': SortConfig('revenue', SortDirection.ASC),
    'roas_desc': SortConfig('roas', SortDirection.DESC),
    'roas_asc': SortConfig('roas', SortDirection.ASC),
    'acos_desc': SortConfig('acos', SortDirection.DESC),
    'acos_asc': SortConfig('acos', SortDirection.ASC),
}


def filter_by_status(campaigns: Iterable[Campaign], status_filter: StatusFilter) -> List[Campaign]:
    """Keep everything for ALL, otherwise only campaigns with that status."""
    status_filter = StatusFilter(status_filter)
    if status_filter == StatusFilter.ALL:
        return list(campaigns)
    return [c for c in campaigns if c.status.value == status_filter.value]


def search_by_name(campaigns: Iterable[Campaign], query: str) -> List[Campaign]:
    """Case-insensitive substring match on the campaign name."""
    needle = (query or '').strip().casefold()
    if not needle:
        return list(campaigns)
    return [c for c in campaigns if needle in c.name.casefold()]


def sort_campaigns(campaigns: Iterable[Campaign], sort_config: SortConfig) -> List[Campaign]:
    """
    Return a new list ordered by the configured column.

    Raises:
        UnknownSortKey: If sort_config.key is not in SORT_FIELDS
    """
    try:
        sort_key = SORT_FIELDS[sort_config.key]
    except KeyError:
        raise UnknownSortKey(sort_config.key) from None

    reverse = SortDirection(sort_config.direction) == SortDirection.DESC
    return sorted(campaigns, key=sort_key, reverse=reverse)


def apply_view(
    campaigns: Iterable[Campaign],
    status_filter: StatusFilter = StatusFilter.ALL,
    sort_config: SortConfig = DEFAULT_SORT,
    query: str = '',
) -> List[Campaign]:
    """Filter, search, then sort. The input is never mutated."""
    data = filter_by_status(campaigns, status_filter)
    data = search_by_name(data, query)
    return sort_campaigns(data, sort_config)


def toggle_sort(current: SortConfig, key: str) -> SortConfig:
    """
    Header click: a new column starts descending, a second click on a
    descending column flips it to ascending.
    """
    if key not in SORT_FIELDS:
        raise UnknownSortKey(key)
    if current.key == key and current.direction == SortDirection.DESC:
        return SortConfig(key, SortDirection.ASC)
    return SortConfig(key, SortDirection.DESC)
