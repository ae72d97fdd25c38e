# study_bot/client/preferences.py
import json
import logging
from enum import Enum
from pathlib import Path
from typing import Union

from pydantic import BaseModel, ValidationError

from ..schemas.subject import Language

logger = logging.getLogger(__name__)


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"


class Preferences(BaseModel):
    """UI preferences, passed explicitly to whatever renders the session."""
    language: Language = Language.AR
    theme: Theme = Theme.LIGHT
    switchable: bool = True

    class Config:
        frozen = True

    def toggle_language(self) -> "Preferences":
        language = Language.EN if self.language == Language.AR else Language.AR
        return self.model_copy(update={"language": language})

    def toggle_theme(self) -> "Preferences":
        if not self.switchable:
            raise ValueError("Theme is not switchable")
        theme = Theme.DARK if self.theme == Theme.LIGHT else Theme.LIGHT
        return self.model_copy(update={"theme": theme})


class PreferenceStore:
    """Reads and writes Preferences as a small JSON document."""

    def __init__(self, path: Union[str, Path], defaults: Preferences = Preferences()):
        self.path = Path(path)
        self.defaults = defaults

    def load(self) -> Preferences:
        if not self.path.exists():
            return self.defaults

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            stored = {key: data[key] for key in ("language", "theme") if key in data}
            if not self.defaults.switchable:
                stored.pop("theme", None)
            return self.defaults.model_copy(update=Preferences(**stored).model_dump(include=set(stored)))
        except (OSError, ValueError, TypeError, ValidationError) as e:
            logger.warning(f"Ignoring unreadable preferences at {self.path}: {e}")
            return self.defaults

    def save(self, preferences: Preferences) -> None:
        # Theme is only remembered when the user can switch it
        data = {"language": preferences.language.value}
        if preferences.switchable:
            data["theme"] = preferences.theme.value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data), encoding="utf-8")
