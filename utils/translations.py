"""
Translations
"""

import logging
from typing import Dict

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = 'es'

TRANSLATIONS: Dict[str, Dict[str, str]] = {
    'es': {
        'loading': 'Cargando notas...',
        'spinning': 'Girando...',
        'tap_to_spin': 'Toca la rueda para girar',
        'spin_button': 'Girar',
        'result': '¡Resultado!',
        'title': 'Ruleta de Proyectos',
        'english': 'Inglés',
        'spanish': 'Español',
        'language_set': 'Idioma cambiado a Español',
        'notes_reloaded': 'Notas recargadas: {count}',
        'notes_unavailable': 'No se pudieron cargar las notas',
    },
    'en': {
        'loading': 'Loading notes...',
        'spinning': 'Spinning...',
        'tap_to_spin': 'Tap wheel to spin',
        'spin_button': 'Spin',
        'result': 'Result!',
        'title': 'Projects Roulette',
        'english': 'English',
        'spanish': 'Spanish',
        'language_set': 'Language switched to English',
        'notes_reloaded': 'Notes reloaded: {count}',
        'notes_unavailable': 'Could not load notes',
    },
}

SUPPORTED_LANGUAGES = tuple(TRANSLATIONS)


class Translations:

    @staticmethod
    def normalize_language(language: str) -> str:
        code = (language or '').strip().lower()
        if code in TRANSLATIONS:
            return code
        logger.debug(f"Unknown language '{language}', falling back to {DEFAULT_LANGUAGE}")
        return DEFAULT_LANGUAGE

    @staticmethod
    def get(language: str) -> Dict[str, str]:
        return TRANSLATIONS[Translations.normalize_language(language)]

    @staticmethod
    def text(language: str, key: str, **kwargs) -> str:
        value = Translations.get(language).get(key, key)
        if kwargs:
            return value.format(**kwargs)
        return value

    @staticmethod
    def language_name(language: str, display_language: str) -> str:
        """Name of ``language`` as written in ``display_language``."""
        key = 'english' if Translations.normalize_language(language) == 'en' else 'spanish'
        return Translations.text(display_language, key)
