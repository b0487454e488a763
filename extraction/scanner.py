"""
Line scanner that turns one unit of C++ text into class records.

``UnitAnalyzer`` walks the unit line by line looking for class headers.
After each header it hands the shared line source to ``ClassBodyScanner``,
which reads until the class's opening brace is balanced and classifies
class-scope declarations as members or methods. Line numbering and the
block-comment flag are shared by both, so they stay consistent across the
whole unit.

Extraction is flat: only headers found outside a class body are recorded.
"""

import io
import logging
from typing import Iterable, Iterator, List, Optional, Tuple

from core.errors import UnitOpenError, UnitStreamError
from extraction.comments import CommentStripper
from extraction.config import DEFAULT_ENCODING
from extraction.matchers import (
    match_class_header,
    match_member,
    match_method,
    parse_inheritance,
    split_declarations,
)
from extraction.models import ClassRecord

logger = logging.getLogger(__name__)


class LineSource:
    """Iterator wrapper that counts 1-indexed line numbers."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines: Iterator[str] = iter(lines)
        self.line_number = 0

    def next_line(self) -> Optional[str]:
        """Return the next line without its newline, or None at end of unit."""
        try:
            line = next(self._lines)
        except StopIteration:
            return None
        self.line_number += 1
        return line.rstrip("\r\n")


class ClassBodyScanner:
    """Reads one class body from a shared line source.

    Only text at class scope (brace depth 1) is classified; bodies of
    inline methods and nested types are skipped. Each ``;``-terminated
    declaration is tried as a member first, then as a method.
    """

    def __init__(self, source: LineSource, stripper: CommentStripper) -> None:
        self._source = source
        self._stripper = stripper
        self._depth = 0

    def scan(self, record: ClassRecord, opening_text: str = "") -> Optional[str]:
        """Populate ``record`` from its body.

        Args:
            record: The record created for the matched header.
            opening_text: Decommented text following the header's ``{``.

        Returns:
            The text after the closing brace on the last body line, or None
            if the unit ended before the body was closed.
        """
        self._depth = 1
        closed, trailing = self._consume(record, opening_text)
        while not closed:
            raw = self._source.next_line()
            if raw is None:
                logger.debug(
                    "Unit ended inside body of class %s (line %d)",
                    record.name,
                    record.line_number,
                )
                return None
            text = self._stripper.strip(raw)
            if not text.strip():
                continue
            closed, trailing = self._consume(record, text)
        return trailing

    def _consume(self, record: ClassRecord, text: str) -> Tuple[bool, str]:
        class_scope: List[str] = []
        for idx, ch in enumerate(text):
            if ch == "{":
                self._depth += 1
            elif ch == "}":
                self._depth -= 1
                if self._depth <= 0:
                    self._classify(record, "".join(class_scope))
                    return True, text[idx + 1:]
                if self._depth == 1:
                    # A closed nested block ends the declaration it belonged to.
                    class_scope.append(";")
            elif self._depth == 1:
                class_scope.append(ch)
        self._classify(record, "".join(class_scope))
        return False, ""

    @staticmethod
    def _classify(record: ClassRecord, text: str) -> None:
        if not text.strip():
            return
        for declaration in split_declarations(text):
            member = match_member(declaration)
            if member is not None:
                record.members.append(member)
                continue
            method = match_method(declaration)
            if method is not None:
                record.methods.append(method)


class UnitAnalyzer:
    """Extracts class records from one unit.

    An analyzer owns its comment state for the pass; use one instance
    per unit.
    """

    def __init__(self, unit_id: str = "") -> None:
        self.unit_id = unit_id
        self._stripper = CommentStripper()

    def analyze_lines(self, lines: Iterable[str]) -> List[ClassRecord]:
        """Scan an iterable of lines and return the classes in source order.

        Raises:
            UnitStreamError: If iterating ``lines`` fails. The error carries
                the records completed before the failure.
        """
        self._stripper.reset()
        source = LineSource(lines)
        body_scanner = ClassBodyScanner(source, self._stripper)
        records: List[ClassRecord] = []

        try:
            at_end = False
            while not at_end:
                raw = source.next_line()
                if raw is None:
                    break
                text: Optional[str] = self._stripper.strip(raw)
                while text is not None and text.strip():
                    header = match_class_header(text)
                    if not header.matched:
                        break
                    record = ClassRecord(
                        name=header.name,
                        base_classes=parse_inheritance(header.inheritance_clause),
                        line_number=source.line_number,
                    )
                    text = body_scanner.scan(record, text[header.body_start:])
                    records.append(record)
                    logger.debug(
                        "Found class %s at line %d (%d members, %d methods)",
                        record.name,
                        record.line_number,
                        len(record.members),
                        len(record.methods),
                    )
                    if text is None:
                        at_end = True
        except (OSError, UnicodeDecodeError) as exc:
            raise UnitStreamError(
                self.unit_id,
                f"read failed after line {source.line_number}: {exc}",
                partial_records=records,
            ) from exc

        return records

    def analyze_text(self, text: str) -> List[ClassRecord]:
        """Scan a whole unit held in memory."""
        return self.analyze_lines(io.StringIO(text))

    def analyze_path(self, path: str, encoding: str = DEFAULT_ENCODING) -> List[ClassRecord]:
        """Scan a unit stored on disk, streaming it line by line.

        Raises:
            UnitOpenError: If the file cannot be opened.
            UnitStreamError: If reading fails part way through.
        """
        try:
            handle = open(path, "r", encoding=encoding)
        except OSError as exc:
            logger.error("Cannot open %s: %s", path, exc)
            raise UnitOpenError(self.unit_id or path, str(exc)) from exc

        with handle:
            return self.analyze_lines(handle)
