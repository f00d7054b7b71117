"""Structured error codes and the exceptions that carry them."""

from typing import Any, Dict, Optional


class CODES:
    LocalesMissing = "111001"
    ContentTypesMissing = "111002"
    FetchContentTypes = "111003"
    GatsbyPluginMissing = "111004"
    ContentTypeNotFound = "111005"
    FetchTags = "111006"
    GenericContentfulError = "111007"


ERROR_MAP: Dict[str, Dict[str, str]] = {
    CODES.LocalesMissing: {
        "text": "Please check if your localeFilter is configured properly. Locales '{localeCodes}' were found but were filtered down to none.",
        "level": "ERROR",
        "category": "USER",
    },
    CODES.ContentTypesMissing: {
        "text": "Please check if your contentTypeFilter is configured properly. Content types were filtered down to none.",
        "level": "ERROR",
        "category": "USER",
    },
    CODES.FetchContentTypes: {
        "text": "{sourceMessage}",
        "level": "ERROR",
        "category": "THIRD_PARTY",
    },
    CODES.GatsbyPluginMissing: {
        "text": "Please check the site configuration. The Contentful integration is missing.",
        "level": "ERROR",
        "category": "USER",
    },
    CODES.ContentTypeNotFound: {
        "text": "{sourceMessage}",
        "level": "ERROR",
        "category": "USER",
    },
    CODES.FetchTags: {
        "text": "{sourceMessage}",
        "level": "ERROR",
        "category": "THIRD_PARTY",
    },
    CODES.GenericContentfulError: {
        "text": "{sourceMessage}",
        "level": "ERROR",
        "category": "THIRD_PARTY",
    },
}


def format_error(code: str, context: Optional[Dict[str, Any]] = None) -> str:
    """Render the human-readable text registered for an error code."""
    entry = ERROR_MAP.get(code)
    context = context or {}
    if entry is None:
        return context.get("sourceMessage", f"Unknown error {code}")

    try:
        return entry["text"].format(**context)
    except KeyError:
        return entry["text"]


class ContentfulSchemaError(Exception):
    """Base error carrying a structured code for the reporter."""

    code = CODES.GenericContentfulError

    def __init__(self, message: str, code: Optional[str] = None, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        if code is not None:
            self.code = code
        self.context = {"sourceMessage": message}
        if context:
            self.context.update(context)

    def to_report(self) -> Dict[str, Any]:
        return {"id": self.code, "context": dict(self.context)}


class RestrictedContentTypeError(ContentfulSchemaError):
    code = CODES.FetchContentTypes

    def __init__(self, content_type_id: str):
        self.content_type_id = content_type_id
        super().__init__(f'Restricted ContentType name found. The name "{content_type_id}" is not allowed.')


class ContentTypeNameMissingError(ContentfulSchemaError):
    code = CODES.FetchContentTypes

    def __init__(self, sys_id: Optional[str]):
        self.sys_id = sys_id
        super().__init__(
            f'ContentType "{sys_id}" has no name, but useNameForId is enabled. '
            "Give the content type a name or disable useNameForId."
        )


class ContentfulAPIError(ContentfulSchemaError):
    code = CODES.FetchContentTypes

    def __init__(self, message: str, status: Optional[int] = None):
        self.status = status
        super().__init__(message, context={"status": status})


class DuplicateTypeError(ContentfulSchemaError):
    def __init__(self, type_name: str):
        self.type_name = type_name
        super().__init__(
            f'Type "{type_name}" is declared more than once. '
            "Rename one of the content types that map to it."
        )
