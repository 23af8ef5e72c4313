"""Exceptions raised by the parser."""

UNKNOWN_CODE = -1


class ParserError(Exception):
    """Base error carrying a description and a numeric code."""

    def __init__(self, info="", code=UNKNOWN_CODE):
        super().__init__(info)
        self._info = info
        self.code = code

    def info(self):
        """Return the description, or the code's description if none was given."""
        return self._info if self._info else self._code_to_string()

    def _code_to_string(self):
        return ""

    def __str__(self):
        return self.info()


class BufferAccessError(ParserError):
    """Raised when a read or write falls outside a buffer."""


class ExeError(ParserError):
    """Raised when an executable cannot be interpreted."""