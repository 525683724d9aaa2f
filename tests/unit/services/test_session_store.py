"""Tests for the session store's reaction to auth state changes."""

import pytest

from app.db.repositories.user import UserRepository
from app.services.session_store import SIGNED_OUT, SessionStore


@pytest.fixture
def users(db, store):
    repo = UserRepository(db, store.feed)
    repo.create_user_profile("p1", name="김코치", phone="010", email="coach@example.com", role="coach")
    return repo


class TestSessionStore:

    def test_starts_signed_out(self, users):
        assert SessionStore(users).current == SIGNED_OUT
        assert not SessionStore(users).current.signed_in

    def test_sign_in_loads_profile(self, users):
        sessions = SessionStore(users)
        state = sessions.on_auth_state_changed("p1")
        assert state.signed_in
        assert state.profile.name == "김코치"
        assert sessions.current is state

    def test_principal_without_profile_is_signed_out(self, users):
        sessions = SessionStore(users)
        sessions.on_auth_state_changed("p1")
        state = sessions.on_auth_state_changed("orphan")
        assert state == SIGNED_OUT
        assert not sessions.current.signed_in

    def test_listeners_see_every_change(self, users):
        sessions = SessionStore(users)
        seen = []
        unsubscribe = sessions.subscribe(seen.append)

        sessions.on_auth_state_changed("p1")
        sessions.sign_out()
        unsubscribe()
        sessions.on_auth_state_changed("p1")

        assert [state.signed_in for state in seen] == [True, False]

    def test_deleted_profile_ends_session(self, users):
        sessions = SessionStore(users)
        sessions.on_auth_state_changed("p1")
        users.delete_user("p1")
        assert not sessions.on_auth_state_changed("p1").signed_in
