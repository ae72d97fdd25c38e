from .authenticator import RequestAuthenticator
from .oauth import OAuthClient, derive_login_method
from .session import COOKIE_NAME, ONE_YEAR_SECONDS, SessionTokenService, session_cookie_options

__all__ = [
    'RequestAuthenticator',
    'OAuthClient',
    'derive_login_method',
    'COOKIE_NAME',
    'ONE_YEAR_SECONDS',
    'SessionTokenService',
    'session_cookie_options'
]
