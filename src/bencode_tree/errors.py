"""
Exceptions raised while decoding Bencoded data.
"""
from typing import Optional

__all__ = [
    "BencodeDecodeError",
    "InvalidByte",
    "UnexpectedEndOfStream",
    "InvalidUtf8",
    "NestingTooDeep",
]


class BencodeDecodeError(Exception):
    """Base class for Bencode decoding errors."""
    position: Optional[int] = None

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return (self.position, self.args) == (other.position, other.args)

    def __hash__(self):
        return hash((type(self), self.position, self.args))


class InvalidByte(BencodeDecodeError):
    """A byte that is not valid for the current production."""

    def __init__(self, position: int):
        super().__init__(f"Invalid byte at index {position}")
        self.position = position

    def __repr__(self):
        return f"InvalidByte({self.position})"


class UnexpectedEndOfStream(BencodeDecodeError):
    """The buffer ran out while a production still needed bytes."""

    def __init__(self):
        super().__init__("Unexpected end of input")

    def __repr__(self):
        return "UnexpectedEndOfStream()"


class InvalidUtf8(BencodeDecodeError):
    """Bytes that must be text are not valid UTF-8."""

    def __init__(self):
        super().__init__("Invalid UTF-8 in string")

    def __repr__(self):
        return "InvalidUtf8()"


class NestingTooDeep(BencodeDecodeError):
    """A list or dict opened past the decoder's depth limit."""

    def __init__(self, position: int):
        super().__init__(f"Nesting too deep at index {position}")
        self.position = position

    def __repr__(self):
        return f"NestingTooDeep({self.position})"
