import unittest
from datetime import datetime

import numpy as np

from meliads.auth import AuthService
from meliads.core.account_management import (
    AccountNotFound,
    connect_account,
    disconnect_account,
    refresh_account,
)
from meliads.core.mock_data import default_linked_accounts, default_team_members
from meliads.core.models import AccountStatus, MemberStatus, TeamRole
from meliads.core.team import (
    INVITE_BASE_URL,
    MemberNotFound,
    TeamError,
    add_member,
    generate_invite_link,
    remove_member,
    validate_password_change,
)

NOW = datetime(2025, 6, 1, 12, 0, 0)


class TestTeam(unittest.TestCase):

    def setUp(self):
        self.members = tuple(default_team_members(NOW))

    def test_add_member(self):
        members = add_member(self.members, '  Novo.Analista@Empresa.com ', TeamRole.VIEWER, now=NOW)
        member = members[-1]

        self.assertEqual(len(members), 4)
        self.assertEqual(member.email, 'novo.analista@empresa.com')
        self.assertEqual(member.name, 'novo.analista')
        self.assertEqual(member.role, TeamRole.VIEWER)
        self.assertEqual(member.status, MemberStatus.PENDING)
        self.assertEqual(member.added_at, NOW)
        self.assertEqual(len(self.members), 3)

    def test_add_member_defaults_to_editor(self):
        self.assertEqual(add_member(self.members, 'x@y.com')[-1].role, TeamRole.EDITOR)

    def test_add_member_rejects_empty_and_duplicate(self):
        with self.assertRaises(TeamError):
            add_member(self.members, '   ')
        with self.assertRaises(TeamError):
            add_member(self.members, 'ADMIN@empresa.com')

    def test_remove_member(self):
        members = remove_member(self.members, '2')
        self.assertEqual([m.id for m in members], ['1', '3'])
        with self.assertRaises(MemberNotFound):
            remove_member(members, '2')

    def test_invite_link(self):
        self.assertEqual(generate_invite_link('tk_abc'), INVITE_BASE_URL + 'tk_abc')
        link = generate_invite_link()
        self.assertTrue(link.startswith(INVITE_BASE_URL + 'tk_'))
        self.assertNotEqual(link, generate_invite_link())

    def test_password_validation(self):
        result = validate_password_change('abc', 'abd')
        self.assertFalse(result.success)
        self.assertEqual(result.reason, "As senhas não coincidem.")

        result = validate_password_change('abc', 'abc')
        self.assertFalse(result.success)
        self.assertIn('6 caracteres', result.reason)

        result = validate_password_change('segura1', 'segura1')
        self.assertTrue(result.success)
        self.assertIsNone(result.reason)


class TestAccounts(unittest.TestCase):

    def setUp(self):
        self.accounts = tuple(default_linked_accounts(NOW))

    def test_connect_account(self):
        accounts = connect_account(self.accounts, now=NOW, rng=np.random.default_rng(7))
        new = accounts[-1]

        self.assertEqual(len(accounts), 3)
        self.assertEqual(new.nickname, 'Nova Conta Vinculada 3')
        self.assertTrue(new.seller_id.startswith('MLB_'))
        self.assertEqual(len(new.seller_id), len('MLB_') + 9)
        self.assertEqual(new.status, AccountStatus.CONNECTED)
        self.assertEqual(new.last_sync, NOW)
        self.assertNotIn(new.id, [a.id for a in self.accounts])

    def test_refresh_expired_account(self):
        later = datetime(2025, 6, 3, 9, 0, 0)
        accounts = refresh_account(self.accounts, '2', now=later)
        self.assertEqual(accounts[1].status, AccountStatus.CONNECTED)
        self.assertEqual(accounts[1].last_sync, later)
        self.assertEqual(accounts[0], self.accounts[0])

    def test_disconnect(self):
        self.assertEqual([a.id for a in disconnect_account(self.accounts, '1')], ['2'])
        with self.assertRaises(AccountNotFound):
            disconnect_account(self.accounts, '99')
        with self.assertRaises(AccountNotFound):
            refresh_account(self.accounts, '99')


class TestAuthService(unittest.TestCase):

    def setUp(self):
        self.service = AuthService()

    def test_sign_in_success(self):
        result = self.service.sign_in(' Gestor@Loja.com ', 'segredo')
        self.assertTrue(result['success'])
        self.assertEqual(result['user'].email, 'gestor@loja.com')
        self.assertEqual(result['user'].name, 'Gestor da Conta')

    def test_sign_in_rejects_short_password_or_missing_email(self):
        for email, password in (('gestor@loja.com', '123'), ('', 'segredo'), (None, None)):
            result = self.service.sign_in(email, password)
            self.assertFalse(result['success'])
            self.assertEqual(result['error'], "Credenciais inválidas. Tente novamente.")


if __name__ == '__main__':
    unittest.main()
