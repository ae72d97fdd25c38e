# study_bot/services/subjects.py
from types import MappingProxyType
from typing import Mapping, Optional

from ..schemas.subject import Subject, SubjectId
from ..utils.errors import SubjectNotFoundError

_CATALOG = [
    Subject(
        id=SubjectId.MATHEMATICS,
        name_ar="الرياضيات",
        name_en="Mathematics",
        description_ar="الأرقام والمعادلات والحسابات",
        description_en="Numbers, equations, and calculations",
        color="#8B0000",
        bg_color="bg-red-900",
        text_color="text-red-50",
        accent_color="from-red-900 to-red-700",
        icon="calculator",
        image="/subjects/mathematics-card.png",
        greeting_ar="مرحباً بك في عالم الأرقام والمعادلات الدقيقة! 🔢",
        greeting_en="Welcome to the world of numbers and equations! 🔢",
        system_prompt_ar="أنت معلم رياضيات ذكي ومتخصص. تشرح المفاهيم الرياضية بطريقة واضحة وسهلة الفهم. تقدم أمثلة عملية وخطوات حل مفصلة.",
        system_prompt_en="You are an intelligent mathematics teacher. Explain mathematical concepts clearly and simply. Provide practical examples and detailed solution steps.",
    ),
    Subject(
        id=SubjectId.PHYSICS,
        name_ar="الفيزياء",
        name_en="Physics",
        description_ar="الحركة والقوى والطاقة",
        description_en="Motion, forces, and energy",
        color="#1E40AF",
        bg_color="bg-blue-900",
        text_color="text-blue-50",
        accent_color="from-blue-900 to-blue-700",
        icon="zap",
        image="/subjects/physics-card.png",
        greeting_ar="مرحباً بك في عالم الحركة والقوى والطاقة! ⚡",
        greeting_en="Welcome to the world of motion, forces, and energy! ⚡",
        system_prompt_ar="أنت معلم فيزياء متخصص وذكي. تشرح الظواهر الفيزيائية بطريقة مبسطة مع أمثلة من الحياة اليومية.",
        system_prompt_en="You are an intelligent physics teacher. Explain physical phenomena simply with real-world examples.",
    ),
    Subject(
        id=SubjectId.CHEMISTRY,
        name_ar="الكيمياء",
        name_en="Chemistry",
        description_ar="العناصر والمركبات والتفاعلات",
        description_en="Elements, compounds, and reactions",
        color="#4A148C",
        bg_color="bg-purple-900",
        text_color="text-purple-50",
        accent_color="from-purple-900 to-purple-700",
        icon="flask",
        image="/subjects/chemistry-card.png",
        greeting_ar="مرحباً بك في عالم العناصر والتفاعلات الكيميائية! 🧪",
        greeting_en="Welcome to the world of elements and chemical reactions! 🧪",
        system_prompt_ar="أنت معلم كيمياء متخصص. تشرح التفاعلات والعناصر بطريقة واضحة مع معادلات موزونة.",
        system_prompt_en="You are an intelligent chemistry teacher. Explain reactions and elements clearly with balanced equations.",
    ),
    Subject(
        id=SubjectId.BIOLOGY,
        name_ar="الأحياء",
        name_en="Biology",
        description_ar="الحياة والكائنات الحية",
        description_en="Life and living organisms",
        color="#004D40",
        bg_color="bg-teal-900",
        text_color="text-teal-50",
        accent_color="from-teal-900 to-teal-700",
        icon="dna",
        image="/subjects/biology-card.png",
        greeting_ar="مرحباً بك في رحلة الحياة والاكتشافات البيولوجية! 🔬",
        greeting_en="Welcome to the journey of life and biology discoveries! 🔬",
        system_prompt_ar="أنت معلم أحياء متخصص وشغوف. تشرح العمليات البيولوجية والكائنات الحية بطريقة مشوقة.",
        system_prompt_en="You are an intelligent and passionate biology teacher. Explain biological processes and organisms engagingly.",
    ),
    Subject(
        id=SubjectId.ARABIC,
        name_ar="اللغة العربية",
        name_en="Arabic",
        description_ar="النحو والأدب واللغة",
        description_en="Grammar, literature, and language",
        color="#E65100",
        bg_color="bg-orange-900",
        text_color="text-orange-50",
        accent_color="from-orange-900 to-orange-700",
        icon="book-open",
        image="/subjects/arabic-card.png",
        greeting_ar="مرحباً بك في عالم اللغة العربية الجميل! 📖",
        greeting_en="Welcome to the beautiful world of Arabic language! 📖",
        system_prompt_ar="أنت معلم لغة عربية متخصص وأديب. تشرح قواعد النحو والأدب بطريقة سلسة وممتعة.",
        system_prompt_en="You are an intelligent Arabic language teacher. Explain grammar and literature clearly and engagingly.",
    ),
    Subject(
        id=SubjectId.ENGLISH,
        name_ar="اللغة الإنجليزية",
        name_en="English",
        description_ar="اللغة الإنجليزية والقواعد",
        description_en="English language and grammar",
        color="#0277BD",
        bg_color="bg-blue-700",
        text_color="text-blue-50",
        accent_color="from-blue-700 to-blue-500",
        icon="globe",
        image="/subjects/english-card.png",
        greeting_ar="مرحباً بك في عالم اللغة الإنجليزية! 🌍",
        greeting_en="Welcome to the world of English language! 🌍",
        system_prompt_ar="أنت معلم لغة إنجليزية متخصص. تشرح القواعد والمفردات بطريقة سهلة وفعالة.",
        system_prompt_en="You are an intelligent English teacher. Explain grammar and vocabulary clearly and effectively.",
    ),
    Subject(
        id=SubjectId.ISLAMIC,
        name_ar="التربية الإسلامية",
        name_en="Islamic Education",
        description_ar="الدين والأخلاق والعبادة",
        description_en="Religion, ethics, and worship",
        color="#2E7D32",
        bg_color="bg-green-700",
        text_color="text-green-50",
        accent_color="from-green-700 to-green-500",
        icon="book-open",
        image="/subjects/islamic-education-card.png",
        greeting_ar="مرحباً بك في رحلة التعليم الإسلامي! 🕌",
        greeting_en="Welcome to the journey of Islamic education! 🕌",
        system_prompt_ar="أنت معلم تربية إسلامية متخصص وحكيم. تشرح المفاهيم الإسلامية بحكمة وعمق.",
        system_prompt_en="You are an intelligent Islamic education teacher. Explain Islamic concepts with wisdom and depth.",
    ),
    Subject(
        id=SubjectId.SOCIAL,
        name_ar="الدراسات الاجتماعية",
        name_en="Social Studies",
        description_ar="التاريخ والجغرافيا والمجتمع",
        description_en="History, geography, and society",
        color="#6D4C41",
        bg_color="bg-amber-900",
        text_color="text-amber-50",
        accent_color="from-amber-900 to-amber-700",
        icon="globe",
        image="/subjects/social-studies-card.png",
        greeting_ar="مرحباً بك في رحلة التاريخ والجغرافيا! 🗺️",
        greeting_en="Welcome to the journey of history and geography! 🗺️",
        system_prompt_ar="أنت معلم دراسات اجتماعية متخصص. تشرح التاريخ والجغرافيا بطريقة شيقة وتفاعلية.",
        system_prompt_en="You are an intelligent social studies teacher. Explain history and geography engagingly and interactively.",
    ),
    Subject(
        id=SubjectId.PHYSICAL,
        name_ar="التربية البدنية",
        name_en="Physical Education",
        description_ar="الرياضة والنشاط البدني",
        description_en="Sports and physical activity",
        color="#FFD700",
        bg_color="bg-yellow-500",
        text_color="text-yellow-900",
        accent_color="from-yellow-500 to-yellow-400",
        icon="activity",
        image="/subjects/pe-sports-card.png",
        greeting_ar="مرحباً بك في عالم الرياضة واللياقة البدنية! ⚽",
        greeting_en="Welcome to the world of sports and fitness! ⚽",
        system_prompt_ar="أنت معلم تربية بدنية متخصص وحماسي. تشرح تقنيات الرياضة والنشاط البدني بطريقة مشوقة وآمنة.",
        system_prompt_en="You are an intelligent and enthusiastic physical education teacher. Explain sports techniques and physical activity safely and engagingly.",
    ),
    Subject(
        id=SubjectId.HEALTH,
        name_ar="العلوم الصحية",
        name_en="Health Sciences",
        description_ar="الصحة والتغذية والعافية",
        description_en="Health, nutrition, and wellness",
        color="#00CED1",
        bg_color="bg-cyan-600",
        text_color="text-cyan-50",
        accent_color="from-cyan-600 to-cyan-500",
        icon="heart",
        image="/subjects/health-sciences-card.png",
        greeting_ar="مرحباً بك في عالم العلوم الصحية والعافية! 💚",
        greeting_en="Welcome to the world of health sciences and wellness! 💚",
        system_prompt_ar="أنت معلم علوم صحية متخصص وعارف. تشرح مفاهيم الصحة والتغذية والعافية بطريقة علمية وسهلة الفهم.",
        system_prompt_en="You are an intelligent health sciences teacher. Explain health, nutrition, and wellness concepts scientifically and clearly.",
    ),
]

SUBJECTS: Mapping[SubjectId, Subject] = MappingProxyType({subject.id: subject for subject in _CATALOG})


def get_subject(subject_id: str) -> Optional[Subject]:
    try:
        return SUBJECTS.get(SubjectId(subject_id))
    except ValueError:
        return None


def require_subject(subject_id: str) -> Subject:
    subject = get_subject(subject_id)
    if subject is None:
        raise SubjectNotFoundError(subject_id)
    return subject


def get_all_subjects() -> list[Subject]:
    return list(SUBJECTS.values())
