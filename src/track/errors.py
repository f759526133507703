# SPDX-License-Identifier: MIT

from typing import Optional


class TrackError(Exception):
    """Base class for every failure raised by the track core."""

    pass


class ParseError(TrackError):
    """Raised when text read from the track file cannot be decoded."""

    def __init__(self, message: str, line: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.line = line
        self.line_number: Optional[int] = None

    def __str__(self) -> str:
        location = ""
        if self.line_number is not None:
            location = f" (line {self.line_number})"
        if self.line is None:
            return f"{self.message}{location}"
        return f"{self.message}{location}: {self.line!r}"


class MalformedLineError(ParseError):
    """The line does not have the `[timestamp] category:value` structure."""

    pass


class MalformedTimestampError(ParseError):
    """The bracketed text is not an RFC3339 datetime."""

    pass


class MalformedQuantityError(ParseError):
    """The value starts like a number but is not a valid float."""

    pass


class InvalidRangeError(TrackError):
    """The lookback window is negative or too large."""

    pass


class StoreIoError(TrackError):
    """The track file could not be created, read or written."""

    pass


class EmptyCategoryError(TrackError):
    """The category is blank."""

    pass


class EmptyValueError(TrackError):
    """The value is blank."""

    pass


class InvalidFieldError(TrackError):
    """A field contains a character the line format cannot hold."""

    pass
