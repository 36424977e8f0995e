"""Element tree navigation helpers shared by the shift parsers.

``context`` arguments describe where the lookup happens (for example
``"discount curve 'USD'"``) and end up in error messages.
"""
from __future__ import annotations

import math
import re
import xml.etree.ElementTree as ET
from typing import Optional

from stress_scenarios.domain.period import Period, parse_period
from stress_scenarios.errors import ShiftValidationError, StructuralError

_REAL = re.compile(r"^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*$")


def locate_node(root: ET.Element, name: str) -> Optional[ET.Element]:
    """Return ``root`` itself if it carries the tag, else its first direct child with it."""
    if root.tag == name:
        return root
    return root.find(name)


def require_child(node: ET.Element, name: str, context: str) -> ET.Element:
    child = node.find(name)
    if child is None:
        raise StructuralError(f"{name} node not found in {context}")
    return child


def get_attribute(node: ET.Element, name: str) -> str:
    """Attribute value stripped of whitespace; absent attributes read as ''."""
    return (node.get(name) or "").strip()


def require_attribute(node: ET.Element, name: str, context: str) -> str:
    value = get_attribute(node, name)
    if not value:
        raise StructuralError(
            f"{node.tag} node in {context} is missing required attribute '{name}'"
        )
    return value


def get_child_value(
    node: ET.Element, name: str, context: str, required: bool = False
) -> Optional[str]:
    """Stripped text of the named child.

    A missing child returns None, or raises StructuralError when ``required``.
    An empty required child also raises.
    """
    child = node.find(name)
    if child is None:
        if required:
            raise StructuralError(f"{name} node not found in {context}")
        return None
    text = (child.text or "").strip()
    if required and not text:
        raise StructuralError(f"{name} node is empty in {context}")
    return text


def parse_real(text: str, context: str) -> float:
    """Plain decimal or scientific notation only; no ``_``, ``nan`` or ``inf``."""
    if text is None or not _REAL.match(text):
        raise ShiftValidationError(f"invalid number '{text}' in {context}")
    value = float(text)
    if not math.isfinite(value):
        raise ShiftValidationError(f"non-finite number '{text}' in {context}")
    return value


def _split(text: str) -> list[str]:
    if not text:
        return []
    return [item.strip() for item in text.split(",")]


def get_child_values_as_floats(
    node: ET.Element, name: str, context: str
) -> tuple[float, ...]:
    """Comma-separated reals from a mandatory child node (empty text gives ())."""
    text = get_child_value(node, name, context)
    if text is None:
        raise StructuralError(f"{name} node not found in {context}")
    return tuple(parse_real(item, f"{name} of {context}") for item in _split(text))


def get_child_values_as_periods(
    node: ET.Element, name: str, context: str
) -> tuple[Period, ...]:
    """Comma-separated periods from a mandatory child node (empty text gives ())."""
    text = get_child_value(node, name, context)
    if text is None:
        raise StructuralError(f"{name} node not found in {context}")
    periods = []
    for item in _split(text):
        try:
            periods.append(parse_period(item))
        except ValueError as e:
            raise ShiftValidationError(f"{e} in {name} of {context}")
    return tuple(periods)
