"""
Caller identity for the current request.

The user is bound in a ContextVar, so concurrent asyncio tasks each see the
binding that was active when they were created.
"""
from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional, Union

from pydantic import BaseModel

from .errors import UserNotFoundError
from .users import Role

_current_user: ContextVar[Optional["SessionUser"]] = ContextVar("current_user", default=None)


class SessionUser(BaseModel):
    id: Union[int, str]
    username: str
    display_name: Optional[str] = None
    role: Role = Role.USER


def current_user() -> Optional[SessionUser]:
    return _current_user.get()


def require_user() -> SessionUser:
    user = _current_user.get()
    if user is None:
        raise UserNotFoundError()
    return user


@contextmanager
def user_session(user: Optional[SessionUser]) -> Iterator[Optional[SessionUser]]:
    token = _current_user.set(user)
    try:
        yield user
    finally:
        _current_user.reset(token)
