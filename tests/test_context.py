import asyncio

import pytest

from flightlog.context import SessionUser, current_user, require_user, user_session
from flightlog.errors import UserNotFoundError


def test_no_user_bound():
    assert current_user() is None
    with pytest.raises(UserNotFoundError):
        require_user()


def test_user_session_binds_and_resets():
    u = SessionUser(id=1, username="alice")
    with user_session(u):
        assert require_user() is u
    assert current_user() is None


def test_tasks_see_their_own_user():
    async def who(user):
        with user_session(user):
            await asyncio.sleep(0)
            return require_user().username

    async def main():
        return await asyncio.gather(
            who(SessionUser(id=1, username="alice")),
            who(SessionUser(id=2, username="bob")),
        )

    assert asyncio.run(main()) == ["alice", "bob"]


def test_default_role():
    assert SessionUser(id="u1", username="carol").role == "user"
