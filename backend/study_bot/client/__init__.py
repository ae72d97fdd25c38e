from .api import TutorAPIClient, TutorAPIError
from .i18n import translate
from .preferences import PreferenceStore, Preferences, Theme
from .session import ChatMessage, ChatSession, SessionBusyError, SessionState

__all__ = [
    'TutorAPIClient',
    'TutorAPIError',
    'translate',
    'PreferenceStore',
    'Preferences',
    'Theme',
    'ChatMessage',
    'ChatSession',
    'SessionBusyError',
    'SessionState'
]
