"""
Team Module - Team Management
=============================
Screen for managing members, invite links and passwords.

Features:
- List members
- Add member by email with a role
- Viewer invite link
- Password change with validation
- Remove member with confirmation
"""

import streamlit as st

from meliads.core.models import TeamRole
from meliads.core.state import MemberAdded, MemberRemoved
from meliads.core.team import TeamError, add_member, generate_invite_link, validate_password_change
from meliads.features._base import BaseFeature
from meliads.ui.session import dispatch
from meliads.utils.formatters import format_date

ROLE_BADGES = {
    TeamRole.ADMIN: "🟣 ADMIN",
    TeamRole.EDITOR: "🔵 EDITOR",
    TeamRole.VIEWER: "⚪ VIEWER",
}


class TeamFeature(BaseFeature):
    """Equipe screen."""

    def render_ui(self):
        self.render_header("Gestão de Equipe", "Controle quem pode acessar e editar suas campanhas.")

        invite_col, list_col = st.columns([1, 2])
        with invite_col:
            self._render_invite_link()
        with list_col:
            self._render_members()

    def _render_invite_link(self):
        if 'invite_link' not in st.session_state:
            st.session_state['invite_link'] = generate_invite_link()

        with st.container(border=True):
            st.markdown("#### 🔗 Link de Convite")
            st.caption("Compartilhe este link para dar acesso de **Visualizador** automaticamente. "
                       "O link expira em 7 dias.")
            st.code(st.session_state['invite_link'], language=None)
            if st.button("Gerar novo link"):
                st.session_state['invite_link'] = generate_invite_link()
                st.rerun()

        st.info("Recomendamos revisar os acessos mensalmente. Usuários com permissão de **Admin** "
                "podem excluir campanhas e alterar orçamentos.")

    def _render_members(self):
        st.markdown("#### 👥 Membros da Equipe")

        with st.expander("Adicionar Pessoa"):
            with st.form("add_member_form", clear_on_submit=True):
                email = st.text_input("E-mail", placeholder="colaborador@empresa.com")
                role = st.selectbox("Função", list(TeamRole), index=1, format_func=lambda r: r.value)
                if st.form_submit_button("Adicionar", type="primary"):
                    try:
                        members = add_member(self.state.members, email, role)
                    except TeamError as e:
                        st.error(str(e))
                    else:
                        dispatch(MemberAdded(members[-1]))

        for member in self.state.members:
            with st.container(border=True):
                info, role_col, actions = st.columns([4, 2, 2])
                with info:
                    st.markdown(f"**{member.name}**")
                    st.caption(f"{member.email} · desde {format_date(member.added_at)} · {member.status.value}")
                role_col.markdown(ROLE_BADGES[member.role])
                with actions:
                    if st.button("🔑 Senha", key=f"pwd_{member.id}"):
                        st.session_state['password_member'] = member.id
                        st.rerun()
                    if st.button("🗑️ Remover", key=f"del_{member.id}"):
                        st.session_state['delete_member'] = member.id
                        st.rerun()

        self._render_password_form()
        self._render_delete_confirmation()

    def _render_password_form(self):
        member_id = st.session_state.get('password_member')
        member = next((m for m in self.state.members if m.id == member_id), None)
        if member is None:
            return

        with st.form("password_form"):
            st.markdown(f"#### Alterar senha de {member.name}")
            new_password = st.text_input("Nova senha", type="password")
            confirm_password = st.text_input("Confirmar senha", type="password")
            submitted = st.form_submit_button("Salvar", type="primary")

        if submitted:
            result = validate_password_change(new_password, confirm_password)
            if not result.success:
                st.error(result.reason)
            else:
                del st.session_state['password_member']
                st.success("Senha alterada com sucesso!")

    def _render_delete_confirmation(self):
        member_id = st.session_state.get('delete_member')
        member = next((m for m in self.state.members if m.id == member_id), None)
        if member is None:
            return

        st.warning(f"Remover **{member.name}** da equipe? Esta ação não pode ser desfeita.")
        yes, no = st.columns(2)
        if yes.button("Remover", type="primary"):
            del st.session_state['delete_member']
            dispatch(MemberRemoved(member.id))
        if no.button("Cancelar", key="cancel_delete"):
            del st.session_state['delete_member']
            st.rerun()
