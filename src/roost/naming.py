"""Word-level naming rules used to turn class names into path segments.

``underscore`` converts a CamelCase identifier into its lower-case,
underscore-separated form. ``singularize`` derives the parameter name of a
parent resource (``projects`` -> ``project_id``).

Singularization is a fixed, ordered rule table rather than a full English
inflector. Words no rule matches are returned unchanged, so the result is
always deterministic. Plurals the suffix rules get wrong (``-ses`` plurals
of ``-s`` and ``-use`` nouns, ``-us`` plurals of ``-u`` nouns) go in
``IRREGULAR``.

Examples::

    >>> underscore("MyAdminSection")
    'my_admin_section'
    >>> singularize("categories")
    'category'
"""

import re

_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")

IRREGULAR: dict[str, str] = {
    "aliases": "alias",
    "causes": "cause",
    "menus": "menu",
    "people": "person",
    "men": "man",
    "women": "woman",
    "children": "child",
    "mice": "mouse",
    "geese": "goose",
    "feet": "foot",
    "teeth": "tooth",
    "cookies": "cookie",
    "movies": "movie",
    "quizzes": "quiz",
}

UNCOUNTABLE: frozenset[str] = frozenset(
    {"equipment", "fish", "information", "news", "series", "sheep", "species"}
)

# (suffix, replacement); first match wins, so longer suffixes come first
SUFFIX_RULES: tuple[tuple[str, str], ...] = (
    ("ies", "y"),
    ("sses", "ss"),
    ("shes", "sh"),
    ("ches", "ch"),
    ("xes", "x"),
    ("zes", "z"),
    ("ouses", "ouse"),
    ("uses", "us"),
    ("ss", "ss"),
    ("us", "us"),
    ("is", "is"),
    ("s", ""),
)


def underscore(word: str) -> str:
    """Convert a CamelCase identifier to lower-case words joined by ``_``.

    Examples::

        "Users"          -> "users"
        "MyAdminSection" -> "my_admin_section"
        "HTTPStatus"     -> "http_status"
        "V1"             -> "v1"
        "sign-ins"       -> "sign_ins"
    """
    word = _ACRONYM_BOUNDARY.sub(r"\1_\2", word)
    word = _WORD_BOUNDARY.sub(r"\1_\2", word)
    return word.replace("-", "_").lower()


def singularize(word: str) -> str:
    """Return the singular form of an underscored word.

    Only the last ``_``-separated word is inflected, so
    ``"user_projects"`` becomes ``"user_project"``.
    """
    head, sep, last = word.rpartition("_")
    return f"{head}{sep}{_singularize_word(last)}"


def _singularize_word(word: str) -> str:
    lowered = word.lower()
    if lowered in UNCOUNTABLE:
        return word
    if lowered in IRREGULAR:
        return IRREGULAR[lowered]
    for suffix, replacement in SUFFIX_RULES:
        # Keep at least one character of stem
        if lowered.endswith(suffix) and len(word) > len(suffix):
            return word[: len(word) - len(suffix)] + replacement
    return word
