# study_bot/schemas/subject.py
from enum import Enum

from pydantic import BaseModel


class Language(str, Enum):
    AR = "ar"
    EN = "en"


class SubjectId(str, Enum):
    MATHEMATICS = "mathematics"
    PHYSICS = "physics"
    CHEMISTRY = "chemistry"
    BIOLOGY = "biology"
    ARABIC = "arabic"
    ENGLISH = "english"
    ISLAMIC = "islamic"
    SOCIAL = "social"
    PHYSICAL = "physical"
    HEALTH = "health"


class Subject(BaseModel):
    id: SubjectId
    name_ar: str
    name_en: str
    description_ar: str
    description_en: str
    color: str
    bg_color: str
    text_color: str
    accent_color: str
    icon: str
    image: str
    greeting_ar: str
    greeting_en: str
    system_prompt_ar: str
    system_prompt_en: str

    class Config:
        frozen = True

    def name(self, language: Language) -> str:
        return self.name_ar if language == Language.AR else self.name_en

    def description(self, language: Language) -> str:
        return self.description_ar if language == Language.AR else self.description_en

    def greeting(self, language: Language) -> str:
        return self.greeting_ar if language == Language.AR else self.greeting_en

    def system_prompt(self, language: Language) -> str:
        return self.system_prompt_ar if language == Language.AR else self.system_prompt_en
