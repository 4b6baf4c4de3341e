"""
In-memory auth session

Holds the signed-in user for the lifetime of the client. A stored user
(e.g. loaded from disk by the host application) is only trusted after the
backend confirms the server-side session with a ping.
"""

from typing import Any, Optional

import attrs

from src.platform.exception.exceptions import ApiRequestError
from src.platform.logging.loguru_io import Logger
from src.service.checkout.app.interface.i_auth_session import IAuthSession
from src.service.checkout.app.interface.i_session_ping_repo import ISessionPingRepo
from src.service.checkout.domain.entity.user_entity import AuthUser


class AuthSession(IAuthSession):
    def __init__(self, *, ping_repo: Optional[ISessionPingRepo] = None) -> None:
        self._ping_repo = ping_repo
        self._user: Optional[AuthUser] = None

    @property
    def current_user(self) -> Optional[AuthUser]:
        return self._user

    @Logger.io
    def login(self, user: AuthUser) -> None:
        self._user = user
        Logger.base.info(f'🔑 [AUTH] User {user.id} logged in')

    @Logger.io
    def logout(self) -> None:
        self._user = None
        Logger.base.info('🔒 [AUTH] User logged out')

    @Logger.io
    def update_user(self, **changes: Any) -> Optional[AuthUser]:
        if self._user is None:
            return None
        self._user = attrs.evolve(self._user, **changes)
        return self._user

    @Logger.io
    async def restore(self, stored_user: Optional[AuthUser]) -> Optional[AuthUser]:
        """
        Re-establish a stored user.

        - ping active      -> user kept
        - ping inactive    -> user cleared (server session expired)
        - ping unreachable -> user kept locally, the next API call decides
        """
        if stored_user is None:
            self._user = None
            return None

        if self._ping_repo is None:
            self._user = stored_user
            return stored_user

        try:
            active = await self._ping_repo.ping()
        except ApiRequestError as e:
            Logger.base.warning(f'⚠️ [AUTH] Could not verify session with server: {e}')
            self._user = stored_user
            return stored_user

        self._user = stored_user if active else None
        if not active:
            Logger.base.info(f'🔒 [AUTH] Stored session for user {stored_user.id} expired')
        return self._user
