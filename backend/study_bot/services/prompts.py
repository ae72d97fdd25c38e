# study_bot/services/prompts.py
from typing import Final

from ..schemas.subject import Language, Subject

CONCISE_INSTRUCTIONS: Final = {
    Language.AR: "أجب بإجابة مختصرة جداً (جملة أو جملتين فقط). اذكر الإجابة مباشرة بدون شرح طويل.",
    Language.EN: "Respond with a very brief answer (1-2 sentences only). Give the direct answer without lengthy explanation.",
}


def compose_system_prompt(subject: Subject, language: Language, concise: bool = False) -> str:
    """Localized tutor persona prompt, with the brevity instruction appended in concise mode."""
    prompt = subject.system_prompt(language)
    if concise:
        prompt += "\n\n" + CONCISE_INSTRUCTIONS[language]
    return prompt
