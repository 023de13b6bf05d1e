"""Errors raised while generating the code table."""


class CodeTableError(Exception):
    """Base class for failures that abort a generation run."""


class NetworkError(CodeTableError):
    """The codec table could not be fetched."""


class ParseError(CodeTableError, ValueError):
    """A row of the codec table is malformed."""

    def __init__(self, line_num: int, message: str):
        """Initialize."""
        super().__init__(f"line {line_num}: {message}")
        self.line_num = line_num


class RenderError(CodeTableError):
    """The template could not be applied to an entry."""
