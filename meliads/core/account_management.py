"""
Account Management
==================
Logic for linked Mercado Livre seller accounts.

Rules:
- Accounts are kept as an immutable tuple; every operation returns a new one
- New accounts arrive CONNECTED with a fresh sync time
- Refreshing an EXPIRED or ERROR account reconnects it
- Unknown ids raise AccountNotFound
"""

import uuid
from dataclasses import replace
from datetime import datetime
from typing import Iterable, Optional, Tuple

import numpy as np

from meliads.core.models import AccountStatus, LinkedAccount


class AccountNotFound(Exception):
    """Raised when an account id is not in the linked list."""
    pass


def _new_account_id() -> str:
    return uuid.uuid4().hex[:9]


def connect_account(
    accounts: Iterable[LinkedAccount],
    now: Optional[datetime] = None,
    rng: Optional[np.random.Generator] = None,
) -> Tuple[LinkedAccount, ...]:
    """
    Append a newly authorized account (result of the OAuth flow).

    Args:
        accounts: Current linked accounts
        now: Sync timestamp (defaults to datetime.now())
        rng: Random generator for the seller id

    Returns:
        New tuple with the account appended
    """
    accounts = tuple(accounts)
    now = now or datetime.now()
    rng = rng or np.random.default_rng()

    new_account = LinkedAccount(
        id=_new_account_id(),
        nickname=f"Nova Conta Vinculada {len(accounts) + 1}",
        seller_id=f"MLB_{int(rng.integers(100_000_000, 1_000_000_000))}",
        status=AccountStatus.CONNECTED,
        last_sync=now,
    )
    return accounts + (new_account,)


def _require_account(accounts: Tuple[LinkedAccount, ...], account_id: str) -> LinkedAccount:
    for account in accounts:
        if account.id == account_id:
            return account
    raise AccountNotFound(f"Account '{account_id}' is not linked")


def disconnect_account(accounts: Iterable[LinkedAccount], account_id: str) -> Tuple[LinkedAccount, ...]:
    """Remove an account. Its data stops being synced."""
    accounts = tuple(accounts)
    _require_account(accounts, account_id)
    return tuple(a for a in accounts if a.id != account_id)


def refresh_account(
    accounts: Iterable[LinkedAccount],
    account_id: str,
    now: Optional[datetime] = None,
) -> Tuple[LinkedAccount, ...]:
    """Renew the token of an account and mark it CONNECTED."""
    accounts = tuple(accounts)
    _require_account(accounts, account_id)
    now = now or datetime.now()
    return tuple(
        replace(a, status=AccountStatus.CONNECTED, last_sync=now) if a.id == account_id else a
        for a in accounts
    )
