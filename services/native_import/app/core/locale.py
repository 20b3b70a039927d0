"""Message catalog and locale names for import diagnostics."""

from typing import Any

from services.native_import.app.config import Settings
from shared.utils.logging import get_logger

logger = get_logger(__name__)

FALLBACK_LOCALE = "en_US"

# locale -> message key -> template ({name} placeholders)
DEFAULT_MESSAGES: dict[str, dict[str, str]] = {
    "en_US": {
        "importexport.error.unknownUserGroup": (
            'Unknown user group "{param}" was encountered.'
        ),
        "importexport.error.missingGivenName": (
            'Author "{authorName}" is missing a given name in the submission language '
            '"{localeName}".'
        ),
    },
    "fr_CA": {
        "importexport.error.unknownUserGroup": (
            'Le groupe d\'utilisateurs inconnu « {param} » a été rencontré.'
        ),
        "importexport.error.missingGivenName": (
            "Le prénom de l'auteur « {authorName} » est manquant dans la langue de la "
            "soumission « {localeName} »."
        ),
    },
}


class LocaleCatalog:
    """Translate message keys and name the locales the platform knows about."""

    def __init__(
        self,
        locale_names: dict[str, str],
        current_locale: str = FALLBACK_LOCALE,
        messages: dict[str, dict[str, str]] | None = None,
    ):
        """Initialize catalog.

        Args:
            locale_names: Locale code -> display name
            current_locale: Locale messages are rendered in
            messages: Locale -> key -> template; defaults to the bundled messages
        """
        self.locale_names = dict(locale_names)
        self.current_locale = current_locale
        self.messages = messages if messages is not None else DEFAULT_MESSAGES

    @classmethod
    def from_settings(cls, settings: Settings) -> "LocaleCatalog":
        """Build a catalog from service settings."""
        return cls(
            locale_names=settings.locale_names,
            current_locale=settings.default_locale,
        )

    def all_locales(self) -> dict[str, str]:
        """Return locale code -> display name for every known locale."""
        return dict(self.locale_names)

    def translate(
        self,
        key: str,
        params: dict[str, Any] | None = None,
        locale: str | None = None,
    ) -> str:
        """Render a message in the requested (or current) locale.

        Falls back to the English template when the locale lacks the key.
        Unknown keys render as ``##key##`` so missing translations stay visible.

        Args:
            key: Message key
            params: Placeholder values; None renders as an empty string
            locale: Locale to render in, defaults to the catalog's current locale

        Returns:
            Rendered message
        """
        locale = locale or self.current_locale
        template = self.messages.get(locale, {}).get(key)
        if template is None:
            template = self.messages.get(FALLBACK_LOCALE, {}).get(key)
        if template is None:
            logger.warning("translation_missing", key=key, locale=locale)
            return f"##{key}##"

        values = {name: "" if value is None else value for name, value in (params or {}).items()}
        return template.format_map(_KeepMissing(values))


class _KeepMissing(dict):
    """format_map mapping that leaves unknown placeholders in place."""

    def __missing__(self, key: str) -> str:
        return "{" + key + "}"
