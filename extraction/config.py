"""
Configuration constants for heuristic C++ class extraction.

Defines the keyword sets and regular expression sources used by the
header, inheritance, member and method matchers.
"""

from typing import FrozenSet

# Access specifiers that may prefix a base class or label a class section
ACCESS_SPECIFIERS: FrozenSet[str] = frozenset({"public", "private", "protected"})

# Words that can never be a base-class name on their own
INHERITANCE_KEYWORDS: FrozenSet[str] = ACCESS_SPECIFIERS | {"virtual"}

# Leading words that rule a class-scope declaration out as a member or method
RESERVED_TYPE_WORDS: FrozenSet[str] = frozenset({
    "return",
    "enum",
    "struct",
    "class",
    "union",
    "typedef",
    "using",
    "friend",
    "template",
    "operator",
    "delete",
    "new",
    "goto",
    "throw",
    "namespace",
    "case",
    "default",
    "virtual",
    "public",
    "private",
    "protected",
})

_RESERVED = "|".join(sorted(RESERVED_TYPE_WORDS))

# Type token: optionally qualified identifier, one non-nested template
# argument list, optional pointer/reference marks. Builtin width words
# (unsigned long ...) may precede it.
TYPE_TOKEN: str = (
    r"(?:(?:unsigned|signed|long|short)\s+)*"
    r"(?:::)?(?:\w+::)*\w+"
    r"(?:\s*<[^<>;()]*>)?"
    r"(?:\s*[*&]+)?"
)

# ``class Name [final] [: bases] {`` with the brace on the same line.
# An ``XXX_API`` export macro may sit between ``class`` and the name.
# Matches that follow ``enum`` are rejected with ENUM_CLASS_PREFIX_PATTERN.
CLASS_HEADER_PATTERN: str = (
    r"(?<![\w:])class\s+"
    r"(?:\w+_API\s+)?"
    r"(?P<name>\w+)"
    r"(?:\s+final)?"
    r"(?:\s*:(?!:)\s*(?P<bases>[^{;]+?))?"
    r"\s*\{"
)

# Text that ends right before an ``enum class`` keyword
ENUM_CLASS_PREFIX_PATTERN: str = r"\benum\s+$"

# One comma-separated segment of an inheritance clause
INHERITANCE_SEGMENT_PATTERN: str = (
    r"^(?:(?:public|private|protected)\s+(?:virtual\s+)?"
    r"|virtual\s+(?:(?:public|private|protected)\s+)?)?"
    r"(?P<name>(?:::)?(?:\w+::)*\w+)"
)

# Non-nested template argument list, stripped from inheritance clauses
TEMPLATE_ARGS_PATTERN: str = r"<[^<>]*>"

# ``public:`` style section label at the start of a declaration
ACCESS_LABEL_PATTERN: str = (
    r"^\s*(?:public|private|protected)(?:\s+(?:slots|Q_SLOTS|signals))?\s*:(?!:)"
)

MEMBER_PATTERN: str = (
    r"^(?:(?:public|private|protected)\s+)?"
    r"(?:(?:static|const|mutable|constexpr|volatile|inline)\s+)*"
    rf"(?!(?:{_RESERVED})\b)"
    rf"(?P<type>{TYPE_TOKEN})"
    r"(?:\s+|(?<=[*&]))"
    r"(?P<name>\w+)"
    r"\s*(?:\[[^\]]*\]\s*)*"
    r"(?:=[^;]*)?"
    r";"
)

METHOD_PATTERN: str = (
    r"^(?:(?:virtual|static|inline|explicit|constexpr|const)\s+)*"
    rf"(?!(?:{_RESERVED})\b)"
    rf"(?P<type>{TYPE_TOKEN})"
    r"(?:\s+|(?<=[*&]))"
    r"(?P<name>\w+)"
    r"\s*\([^()]*\)"
    r"(?:\s*const)?"
    r"(?:\s*noexcept)?"
    r"(?:\s*override)?"
    r"(?:\s*final)?"
    r"(?:\s*=\s*0)?"
)

# Comment markers
BLOCK_COMMENT_OPEN: str = "/*"
BLOCK_COMMENT_CLOSE: str = "*/"
LINE_COMMENT: str = "//"

DEFAULT_ENCODING: str = "utf-8"

# Source and header extensions treated as C++ by callers that collect units
CPP_EXTENSIONS: FrozenSet[str] = frozenset({
    ".cpp",
    ".cxx",
    ".cc",
    ".c++",
    ".h",
    ".hpp",
    ".hxx",
    ".h++",
})
