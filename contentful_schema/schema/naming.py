import re
import unicodedata
from typing import List

TYPE_PREFIX = "Contentful"

_APOSTROPHES = re.compile(r"['’]")

# Latin letters without a canonical decomposition
_DEBURRED_LETTERS = {
    "Æ": "Ae", "æ": "ae", "Ð": "D", "ð": "d", "Ø": "O", "ø": "o", "Þ": "Th", "þ": "th", "ß": "ss",
    "Đ": "D", "đ": "d", "Ħ": "H", "ħ": "h", "ı": "i", "Ĳ": "IJ", "ĳ": "ij", "ĸ": "k",
    "Ŀ": "L", "ŀ": "l", "Ł": "L", "ł": "l", "ŉ": "'n", "Ŋ": "N", "ŋ": "n",
    "Œ": "Oe", "œ": "oe", "Ŧ": "T", "ŧ": "t", "ſ": "s",
}

_LATIN = re.compile(r"[\xc0-\xd6\xd8-\xf6\xf8-\xff\u0100-\u017f]")
_COMBO_MARKS = re.compile(r"[\u0300-\u036f\ufe20-\ufe2f\u20d0-\u20ff]")

# Runs over a per-character class string: "A" upper, "a" other letters,
# "0" ASCII digit, " " anything else. Acronym followed by a capitalized word
# ("HTMLParser" -> "HTML", "Parser"), then capitalized or lowercase words,
# then bare capitals, then digit runs.
_WORDS = re.compile(r"A+(?=Aa)|A?a+|A+|0+")


def _deburr_letter(match: "re.Match") -> str:
    letter = match.group(0)
    if letter in _DEBURRED_LETTERS:
        return _DEBURRED_LETTERS[letter]
    return unicodedata.normalize("NFD", letter)


def deburr(value: str) -> str:
    """Fold Latin letters to ASCII and drop combining marks: "Straße Café" -> "Strasse Cafe"."""
    return _COMBO_MARKS.sub("", _LATIN.sub(_deburr_letter, value))


def _char_class(c: str) -> str:
    if c.isascii() and c.isdigit():
        return "0"
    if c.isupper():
        return "A"
    if c.isalpha():
        return "a"
    return " "


def words(value: str) -> List[str]:
    value = _APOSTROPHES.sub("", deburr(value))
    classes = "".join(_char_class(c) for c in value)
    return [value[m.start():m.end()] for m in _WORDS.finditer(classes)]


def upper_first(value: str) -> str:
    return value[:1].upper() + value[1:]


def camel_case(value: str) -> str:
    """
    Convert a string to camelCase the way lodash does.

    Examples: "Contentful blog post" -> "contentfulBlogPost",
    "Contentful HTMLParser" -> "contentfulHtmlParser".
    Letters outside the Latin alphabet are kept as word characters.
    """
    parts = words(value)
    if not parts:
        return ""

    return parts[0].lower() + "".join(upper_first(part.lower()) for part in parts[1:])


def content_type_type_name(identifier: str) -> str:
    """Schema type name for a content type, e.g. "blogPost" -> "ContentfulBlogPost"."""
    return upper_first(camel_case(f"{TYPE_PREFIX} {identifier}"))
