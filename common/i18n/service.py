"""
Message lookup for localized strings.

Translations live in JSON files, one directory per language and one file
per namespace:

    locales/
      en/
        organization.json
      zh/
        organization.json

Keys use dot notation where the first part is the namespace:

    i18n = I18nService(locales_dir="./locales", default_language="en")
    i18n.t("organization.userOrgSuffix", language="zh")
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)


class I18nService:
    """
    Loads translations once at startup and resolves keys with fallback
    to the default language.
    """

    def __init__(
        self,
        locales_dir: str,
        default_language: str = "en",
        supported_languages: Optional[List[str]] = None,
    ):
        """
        Initialize i18n service.

        Args:
            locales_dir: Path to the locales directory
            default_language: Language used when a key or language is missing
            supported_languages: Language codes to load. Auto-detected from
                the directory layout when omitted.
        """
        self.locales_dir = Path(locales_dir)
        self.default_language = default_language
        self.translations: Dict[str, Dict[str, Any]] = {}
        self.supported_languages = supported_languages or self._detect_languages()

        self._load_translations()

    def _detect_languages(self) -> List[str]:
        if not self.locales_dir.exists():
            logger.warning(f"Locales directory not found: {self.locales_dir}")
            return [self.default_language]

        languages = sorted(
            path.name
            for path in self.locales_dir.iterdir()
            if path.is_dir() and not path.name.startswith(".")
        )
        return languages or [self.default_language]

    def _load_translations(self) -> None:
        for lang in self.supported_languages:
            self.translations[lang] = {}
            lang_dir = self.locales_dir / lang

            if not lang_dir.exists():
                continue

            for file_path in lang_dir.glob("*.json"):
                try:
                    with open(file_path, "r", encoding="utf-8") as f:
                        self.translations[lang][file_path.stem] = json.load(f)
                except (json.JSONDecodeError, OSError) as e:
                    logger.warning(f"Failed to load translations from {file_path}: {e}")

        logger.debug(f"Loaded translations for languages: {self.supported_languages}")

    def _lookup(self, language: str, key: str) -> Optional[Any]:
        namespace, _, path = key.partition(".")
        current: Any = self.translations.get(language, {}).get(namespace, {})
        for part in path.split("."):
            if not isinstance(current, dict) or part not in current:
                return None
            current = current[part]
        return current

    def t(
        self,
        key: str,
        language: Optional[str] = None,
        **variables: Any,
    ) -> str:
        """
        Get translation by dot-notation key.

        Args:
            key: e.g. 'organization.userOrgSuffix'
            language: Language code; unsupported or missing falls back to default
            **variables: Values substituted into {name} placeholders.
                The special key `default` is returned when nothing matches.

        Returns:
            Translated string, or the key itself when not found
        """
        lang = language if self.is_supported(language) else self.default_language

        value = self._lookup(lang, key)
        if value is None and lang != self.default_language:
            value = self._lookup(self.default_language, key)

        if value is None:
            return variables.get("default", key)

        result = value if isinstance(value, str) else str(value)
        for var_name, var_value in variables.items():
            if var_name == "default":
                continue
            result = result.replace(f"{{{var_name}}}", str(var_value))

        return result

    def has(self, key: str, language: Optional[str] = None) -> bool:
        """Check if a key resolves in the given (or default) language."""
        lang = language if self.is_supported(language) else self.default_language
        return self._lookup(lang, key) is not None

    def is_supported(self, language: Optional[str]) -> bool:
        return language in self.supported_languages
