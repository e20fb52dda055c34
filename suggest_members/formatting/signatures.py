"""
Signature Formatting

Converts raw type-signature strings reported by the type oracle into
readable lines bound to a name. A brace-delimited signature holding several
call signatures is an overload set and renders one line per overload:

    >>> format_signature_lines("pipe", "{ <A>(a: A): A; <A, B = never>(a: A, ab: (a: A) => B): B; }")
    ['pipe<A>', 'pipe<A, B = never>']
    >>> format_signature_lines("getItem", "(key: string) => string | null")
    ['getItem(key: string): string | null']
"""

import re
from dataclasses import dataclass

__all__ = [
    "DepthState",
    "extract_generic_clause",
    "format_overload_label",
    "format_signature_lines",
    "format_single_signature",
    "split_top_level_segments",
]

_ARROW_SIGNATURE = re.compile(r"^\((.*)\) => (.*)$")


def _closes_angle(char: str, prev: str) -> bool:
    # "=>" is an arrow, not a closing angle bracket
    return char == ">" and prev != "="


@dataclass
class DepthState:
    """Nesting depth of each bracket family while scanning a signature."""
    paren: int = 0
    bracket: int = 0
    brace: int = 0
    angle: int = 0

    @property
    def is_top_level(self) -> bool:
        return (
            self.paren == 0
            and self.bracket == 0
            and self.brace == 0
            and self.angle == 0
        )

    def update(self, char: str, prev: str) -> None:
        """Account for ``char``; ``prev`` is the character before it."""
        if char == "(":
            self.paren += 1
        elif char == ")":
            self.paren = max(0, self.paren - 1)
        elif char == "[":
            self.bracket += 1
        elif char == "]":
            self.bracket = max(0, self.bracket - 1)
        elif char == "{":
            self.brace += 1
        elif char == "}":
            self.brace = max(0, self.brace - 1)
        elif char == "<":
            self.angle += 1
        elif _closes_angle(char, prev):
            self.angle = max(0, self.angle - 1)


def split_top_level_segments(text: str) -> list[str]:
    """
    Split ``text`` on semicolons that sit outside every bracket pair.

    Blank segments are dropped; the returned segments are not trimmed.
    """
    segments: list[str] = []
    current: list[str] = []
    depth = DepthState()
    prev = ""

    for char in text:
        if char == ";" and depth.is_top_level:
            segment = "".join(current)
            if segment.strip():
                segments.append(segment)
            current = []
        else:
            current.append(char)
            depth.update(char, prev)
        prev = char

    tail = "".join(current)
    if tail.strip():
        segments.append(tail)
    return segments


def extract_generic_clause(value: str) -> str | None:
    """Return the leading ``<...>`` clause of ``value``, or None if absent or unclosed."""
    if not value.startswith("<"):
        return None

    depth = 0
    prev = ""
    for index, char in enumerate(value):
        if char == "<":
            depth += 1
        elif _closes_angle(char, prev) and depth > 0:
            depth -= 1
            if depth == 0:
                return value[: index + 1]
        prev = char
    return None


def format_overload_label(name: str, signature: str) -> str:
    """Render one overload as ``name<generics>`` or the bare ``name``."""
    trimmed = signature.strip()
    if trimmed.startswith(name):
        trimmed = trimmed[len(name):].lstrip()
    generic = extract_generic_clause(trimmed)
    return f"{name}{generic}" if generic else name


def format_single_signature(name: str, signature: str) -> str:
    """Render a single (non-overloaded) signature bound to ``name``."""
    trimmed = signature.strip()

    match = _ARROW_SIGNATURE.match(trimmed)
    if match:
        return f"{name}({match.group(1)}): {match.group(2)}"

    if trimmed.startswith((f"{name}(", f"{name}<")):
        return trimmed

    if trimmed.startswith(("<", "(")):
        return f"{name}{trimmed}"

    return f"{name}: {trimmed}"


def format_signature_lines(name: str, signature: str) -> list[str]:
    """Format ``signature`` as one line, or one line per overload."""
    trimmed = signature.strip()
    if trimmed.startswith("{") and trimmed.endswith("}"):
        inner = trimmed[1:-1].strip()
        segments = [
            segment.strip()
            for segment in split_top_level_segments(inner)
            if segment.strip()
        ]
        if len(segments) > 1:
            return [format_overload_label(name, segment) for segment in segments]

    return [format_single_signature(name, signature)]
