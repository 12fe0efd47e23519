from __future__ import annotations


class Uuidv47Error(Exception):
    """Base class for uuidv47-specific errors."""


# Text parsing
class ParseError(Uuidv47Error, ValueError):
    message = "Invalid UUID string"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class InvalidLength(ParseError):
    message = "Invalid UUID string length"


class InvalidFormat(ParseError):
    message = "Invalid UUID string format"


class InvalidHexChar(ParseError):
    message = "Invalid hexadecimal character"


# Key material
class KeyMaterialError(Uuidv47Error, ValueError):
    pass
