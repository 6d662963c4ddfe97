"""Path parameter parsing and type conversion.

Built-in converters for placeholders. A converter is chosen from the type
annotation of the matching accessor on an action (``id: int``) and both
constrains matching and converts the captured string.
"""

from typing import Any

# (regex_pattern, python_type) for each supported converter
CONVERTERS: dict[str, tuple[str, type]] = {
    "str": (r"[^/]+", str),
    "int": (r"\d+", int),
    "float": (r"\d+(?:\.\d+)?", float),
    "path": (r".+", str),
}

_ANNOTATION_NAMES: dict[Any, str] = {
    str: "str",
    int: "int",
    float: "float",
    "str": "str",
    "int": "int",
    "float": "float",
}


def convert_param(value: str, param_type: str) -> str | int | float:
    """Convert a captured path parameter string to the target type.

    Raises ``ValueError`` if the string cannot be converted.
    Raises ``KeyError`` if *param_type* is not a registered converter.
    """
    _, target_type = CONVERTERS[param_type]
    return target_type(value)


def converter_for(annotation: Any) -> str | None:
    """Return the converter name for a type annotation, or None.

    String annotations (from ``from __future__ import annotations``) are
    matched by name.
    """
    try:
        return _ANNOTATION_NAMES.get(annotation)
    except TypeError:
        # Unhashable annotation objects have no converter
        return None
