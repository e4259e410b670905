"""Formatting and class helpers shared by the animation modules."""
from __future__ import annotations

import re
from typing import List, Union
from xml.etree import ElementTree as ET

Number = Union[int, float]

_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")


def format_number(value: Number) -> str:
    """Render a number the way transform strings expect it.

    Integral values drop the decimal part (``96.0`` -> ``"96"``, ``-0.0`` -> ``"0"``).
    """
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)


def px(value: Number) -> str:
    return f"{format_number(value)}px"


def deg(value: Number) -> str:
    return f"{format_number(value)}deg"


def css_property_name(name: str) -> str:
    """transformOrigin -> transform-origin."""
    return _CAMEL_RE.sub("-", name).lower()


def _class_list(el: ET.Element) -> List[str]:
    return [c for c in (el.get("class") or "").split() if c]


def has_class(el: ET.Element, class_name: str) -> bool:
    return class_name in _class_list(el)


def ensure_class(el: ET.Element, class_name: str) -> None:
    classes = _class_list(el)
    if class_name not in classes:
        classes.append(class_name)
    el.set("class", " ".join(classes))


def remove_class(el: ET.Element, class_name: str) -> None:
    classes = _class_list(el)
    if class_name not in classes:
        return
    remaining = [c for c in classes if c != class_name]
    if remaining:
        el.set("class", " ".join(remaining))
    else:
        el.attrib.pop("class", None)
