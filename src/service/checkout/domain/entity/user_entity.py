from typing import Optional

import attrs


@attrs.define(frozen=True)
class AuthUser:
    """The signed-in user as reported by the auth collaborator"""

    id: int
    name: str = ''
    email: str = ''
    role: str = 'user'
    avatar_url: Optional[str] = None
