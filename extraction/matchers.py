"""
Heuristic line matchers for class headers, inheritance clauses and
class-scope declarations.

Each matcher works on already-decommented text and is independent of the
others, so they can be tested in isolation. None of them balances nested
parentheses or template brackets.
"""

import re
from dataclasses import dataclass
from typing import List, Optional

from extraction.config import (
    ACCESS_LABEL_PATTERN,
    CLASS_HEADER_PATTERN,
    ENUM_CLASS_PREFIX_PATTERN,
    INHERITANCE_KEYWORDS,
    INHERITANCE_SEGMENT_PATTERN,
    MEMBER_PATTERN,
    METHOD_PATTERN,
    TEMPLATE_ARGS_PATTERN,
)

_CLASS_HEADER_RE = re.compile(CLASS_HEADER_PATTERN)
_ENUM_CLASS_PREFIX_RE = re.compile(ENUM_CLASS_PREFIX_PATTERN)
_INHERITANCE_SEGMENT_RE = re.compile(INHERITANCE_SEGMENT_PATTERN)
_TEMPLATE_ARGS_RE = re.compile(TEMPLATE_ARGS_PATTERN)
_ACCESS_LABEL_RE = re.compile(ACCESS_LABEL_PATTERN)
_MEMBER_RE = re.compile(MEMBER_PATTERN)
_METHOD_RE = re.compile(METHOD_PATTERN)
_DECLARATION_RE = re.compile(r"[^;]+;?")


@dataclass(frozen=True)
class HeaderMatch:
    """Result of looking for a class header on one line.

    Attributes:
        name: Class name, empty when not matched.
        inheritance_clause: Raw text between ``:`` and ``{``, or empty.
        matched: Whether a header was found.
        body_start: Column just past the opening brace.
    """

    name: str = ""
    inheritance_clause: str = ""
    matched: bool = False
    body_start: int = -1


NO_HEADER = HeaderMatch()


def match_class_header(line: str) -> HeaderMatch:
    """Find a class header whose opening brace is on the same line.

    Headers that wrap before the brace are not recognised, and neither is
    ``enum class``.

    Example:
        >>> match_class_header("class Dog : public Animal {").name
        'Dog'
    """
    for match in _CLASS_HEADER_RE.finditer(line):
        if _ENUM_CLASS_PREFIX_RE.search(line, 0, match.start()):
            continue
        return HeaderMatch(
            name=match.group("name"),
            inheritance_clause=(match.group("bases") or "").strip(),
            matched=True,
            body_start=match.end(),
        )
    return NO_HEADER


def _strip_template_args(text: str) -> str:
    previous = None
    while previous != text:
        previous = text
        text = _TEMPLATE_ARGS_RE.sub("", text)
    return text


def parse_inheritance(clause: str) -> List[str]:
    """Split a raw inheritance clause into base-class names.

    Access specifiers and ``virtual`` are discarded in either order. A
    qualified name yields its last component. Segments without a usable
    identifier are dropped.

    Example:
        >>> parse_inheritance("public A, private virtual B")
        ['A', 'B']
    """
    bases: List[str] = []
    for part in _strip_template_args(clause).split(","):
        part = part.strip()
        if not part:
            continue
        match = _INHERITANCE_SEGMENT_RE.match(part)
        if match is None:
            continue
        name = match.group("name").split("::")[-1]
        if not name or name in INHERITANCE_KEYWORDS:
            continue
        bases.append(name)
    return bases


def strip_access_labels(text: str) -> str:
    """Remove leading ``public:``-style labels from a declaration."""
    previous = None
    while previous != text:
        previous = text
        text = _ACCESS_LABEL_RE.sub("", text, count=1).strip()
    return text


def split_declarations(text: str) -> List[str]:
    """Split class-scope text into ``;``-terminated declarations, labels removed."""
    declarations = []
    for chunk in _DECLARATION_RE.findall(text):
        chunk = strip_access_labels(chunk.strip())
        if chunk and chunk != ";":
            declarations.append(chunk)
    return declarations


def _normalize_type(type_text: str) -> str:
    type_text = re.sub(r"\s+", " ", type_text.strip())
    return re.sub(r"\s+([*&])", r"\1", type_text)


def match_member(declaration: str) -> Optional[str]:
    """Return ``"<type> <name>"`` if the declaration looks like a member variable."""
    match = _MEMBER_RE.match(declaration)
    if match is None:
        return None
    return f"{_normalize_type(match.group('type'))} {match.group('name')}"


def match_method(declaration: str) -> Optional[str]:
    """Return ``"<type> <name>(...)"`` if the declaration looks like a method."""
    match = _METHOD_RE.match(declaration)
    if match is None:
        return None
    return f"{_normalize_type(match.group('type'))} {match.group('name')}(...)"
