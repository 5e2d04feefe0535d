from typing import Optional


class I18nError(Exception):
    """Base class for i18n failures."""
    pass


class UnsupportedLanguageError(I18nError, ValueError):
    """Raised when a language code is outside the supported set."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Unsupported language: {code}")


class LanguageLoadError(I18nError):
    """Raised when a language file cannot be fetched or parsed."""

    def __init__(self, code: str, reason: str = "", cause: Optional[BaseException] = None):
        self.code = code
        self.cause = cause
        message = f"Failed to load language file: {code}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
