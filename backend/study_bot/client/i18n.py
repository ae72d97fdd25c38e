# study_bot/client/i18n.py
from typing import Final, Optional

from ..schemas.subject import Language

TRANSLATIONS: Final[dict[str, dict[Language, str]]] = {
    "app.title": {Language.AR: "أكاديمية الفلاح", Language.EN: "Al Falah Academy"},
    "app.subtitle": {Language.AR: "مساعد الدراسة الذكي", Language.EN: "Smart Study Bot"},

    # Common UI
    "ui.language": {Language.AR: "اللغة", Language.EN: "Language"},
    "ui.selectSubject": {Language.AR: "اختر مادة دراسية", Language.EN: "Select a Subject"},
    "ui.askQuestion": {Language.AR: "اسأل سؤالاً", Language.EN: "Ask a Question"},
    "ui.send": {Language.AR: "إرسال", Language.EN: "Send"},
    "ui.back": {Language.AR: "العودة", Language.EN: "Back"},
    "ui.chat": {Language.AR: "الدردشة", Language.EN: "Chat"},
    "ui.typing": {Language.AR: "جاري الكتابة...", Language.EN: "Typing..."},
    "ui.placeholder": {
        Language.AR: "اسأل سؤالاً أو اطلب مساعدة...",
        Language.EN: "Ask a question or request help...",
    },
    "ui.subjectNotFound": {Language.AR: "المادة غير موجودة", Language.EN: "Subject not found"},

    # Chat
    "chat.error": {
        Language.AR: "عذراً، حدث خطأ. يرجى المحاولة مرة أخرى.",
        Language.EN: "Sorry, an error occurred. Please try again.",
    },
}


def translate(key: str, language: Language, default: Optional[str] = None) -> str:
    """Look up a UI string. Unknown keys fall back to the key itself."""
    entry = TRANSLATIONS.get(key)
    if entry is None:
        return default if default is not None else key
    return entry.get(language, key)
