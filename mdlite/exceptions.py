"""Package-specific exception types."""

from __future__ import annotations


class ConversionError(ValueError):
    """Base class for conversion-related errors.

    The conversion core itself never raises; these errors come from the
    limits enforced when converting files.
    """


class LineTooLongError(ConversionError):
    """Raised when a line exceeds the configured maximum length.

    Args:
        line_number: One-based index of the offending line.
        max_line_length: Maximum allowed line length in characters.
    """

    def __init__(self, line_number: int, max_line_length: int):
        self.line_number = line_number
        self.max_line_length = max_line_length
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        return (
            f"Line {self.line_number} exceeds maximum allowed length "
            f"of {self.max_line_length} characters"
        )


class FileTooLargeError(ConversionError):
    """Raised when an input file is larger than allowed.

    Args:
        size: Size of the file in bytes.
        max_size: Maximum allowed size in bytes.
    """

    def __init__(self, size: int, max_size: int):
        self.size = size
        self.max_size = max_size
        super().__init__(f"File size {self.size} exceeds the limit of {self.max_size} bytes")
