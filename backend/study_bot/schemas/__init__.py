from .auth import (
    LogoutResponse,
    OAuthUserInfo,
    Role,
    SessionPayload,
    User,
    UserUpsert
)

from .chat import (
    ChatRequest,
    ChatResponse
)

from .subject import (
    Language,
    Subject,
    SubjectId
)

from .system import (
    HealthResponse,
    NotifyOwnerRequest,
    NotifyOwnerResponse
)

__all__ = [
    'LogoutResponse',
    'OAuthUserInfo',
    'Role',
    'SessionPayload',
    'User',
    'UserUpsert',
    'ChatRequest',
    'ChatResponse',
    'Language',
    'Subject',
    'SubjectId',
    'HealthResponse',
    'NotifyOwnerRequest',
    'NotifyOwnerResponse'
]
