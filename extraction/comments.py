"""
Comment removal for line-by-line scanning.

Block comments may span lines, so the stripper carries an
``in_block_comment`` flag from one call to the next. One stripper belongs
to exactly one pass over one unit.
"""

from extraction.config import BLOCK_COMMENT_CLOSE, BLOCK_COMMENT_OPEN, LINE_COMMENT


class CommentStripper:
    """Removes ``//`` and ``/* ... */`` comments from successive lines."""

    def __init__(self) -> None:
        self.in_block_comment = False

    def reset(self) -> None:
        self.in_block_comment = False

    def strip(self, line: str) -> str:
        """Return ``line`` with all comment text removed.

        Lines must be fed in file order; the block-comment flag is updated
        as a side effect.

        Example:
            >>> stripper = CommentStripper()
            >>> stripper.strip("class A /* note */ { // tail")
            'class A  { '
        """
        result = line

        if self.in_block_comment:
            end = result.find(BLOCK_COMMENT_CLOSE)
            if end == -1:
                return ""
            self.in_block_comment = False
            result = result[end + len(BLOCK_COMMENT_CLOSE):]

        while True:
            start = result.find(BLOCK_COMMENT_OPEN)
            marker = result.find(LINE_COMMENT)
            # A ``//`` ahead of any ``/*`` hides the rest of the line.
            if marker != -1 and (start == -1 or marker < start):
                return result[:marker]
            if start == -1:
                return result
            end = result.find(BLOCK_COMMENT_CLOSE, start + len(BLOCK_COMMENT_OPEN))
            if end == -1:
                self.in_block_comment = True
                return result[:start]
            result = result[:start] + result[end + len(BLOCK_COMMENT_CLOSE):]
