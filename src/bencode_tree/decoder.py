"""
Bencode decoder for BitTorrent metainfo and tracker responses.
"""
from .errors import (
    BencodeDecodeError,
    InvalidByte,
    InvalidUtf8,
    NestingTooDeep,
    UnexpectedEndOfStream,
)
from .structure import BencodeDict, BencodeInt, BencodeList, BencodeString

# Maximum nesting of lists and dicts a decoder accepts
DEFAULT_MAX_DEPTH = 256

_INT64_SPAN = 1 << 64
_UINT64_MASK = _INT64_SPAN - 1
_INT64_MIN = -(1 << 63)


def _wrap_int64(n: int) -> int:
    """Wraps an arbitrary integer into the signed 64-bit range."""
    return (n - _INT64_MIN) % _INT64_SPAN + _INT64_MIN


class BencodeDecoder:
    """
    Decodes Bencoded byte strings into a tree of Bencode values.

    One decoder parses exactly one top-level value. Bytes after that value
    are left untouched; ``pos`` points just past it once ``decode`` returns.

    With ``text=True`` every string value must be valid UTF-8. Dictionary
    keys are always held to that rule.
    """
    def __init__(self, data: bytes, pos: int = 0, *, text: bool = False,
                 max_depth: int = DEFAULT_MAX_DEPTH):
        if isinstance(data, str):
            raise TypeError("BencodeDecoder requires bytes, not str.")
        self.data = bytes(data)
        self.pos = pos  # cursor index
        self.text = text
        self.max_depth = max_depth
        self.depth = 0

    def decode(self):
        """Main decode entry point. Decodes one value starting at the cursor."""
        self.depth = 0
        return self._parse_value()

    # --------------------------
    # Low-level utilities
    # --------------------------

    def _peek(self) -> bytes:
        if self.pos >= len(self.data):
            raise UnexpectedEndOfStream()
        return self.data[self.pos:self.pos+1]

    def _consume(self, n=1) -> bytes:
        """Moves cursor forward by n bytes and returns the consumed chunk."""
        chunk = self.data[self.pos:self.pos+n]
        self.pos += n
        return chunk

    def _enter(self):
        if self.depth >= self.max_depth:
            raise NestingTooDeep(self.pos)
        self.depth += 1

    # --------------------------
    # Parsing functions
    # --------------------------

    def _parse_value(self):
        ch = self._peek()

        if ch == b'd':
            return self._parse_dict()

        if ch == b'l':
            return self._parse_list()

        if ch == b'i':
            return self._parse_int()

        if ch.isdigit():  # Bencode strings start with length, which is a digit
            return BencodeString(self._parse_string(validate=self.text))

        raise InvalidByte(self.pos)

    def _parse_int(self):
        """Parses an integer from the Bencoded data."""
        self._consume(1)  # skip 'i'

        negative = False
        if self._peek() == b'-':
            negative = True
            self._consume(1)

        # an empty digit run is read as 0; digits accumulate modulo 2**64
        num = 0
        while self._peek() != b'e':
            ch = self._peek()
            if not ch.isdigit():
                raise InvalidByte(self.pos)
            num = (num * 10 + int(ch)) & _UINT64_MASK
            self._consume(1)

        self._consume(1)  # skip 'e'
        return BencodeInt(_wrap_int64(-num if negative else num))

    def _parse_string(self, validate: bool) -> bytes:
        """Parses a byte string from the Bencoded data and returns its payload."""
        # read length until ':'
        length = 0
        while self._peek() != b':':
            ch = self._peek()
            if not ch.isdigit():
                raise InvalidByte(self.pos)
            # past the buffer size the exact length no longer matters
            length = min(length * 10 + int(ch), len(self.data) + 1)
            self._consume(1)

        self._consume(1)  # skip ':'

        if self.pos + length > len(self.data):
            raise UnexpectedEndOfStream()

        raw = self._consume(length)
        if validate:
            try:
                raw.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise InvalidUtf8() from exc
        return raw

    def _parse_list(self):
        """Parses a list from the Bencoded data."""
        self._enter()
        self._consume(1)  # skip 'l'
        items = []

        while self._peek() != b'e':
            items.append(self._parse_value())

        self._consume(1)  # skip 'e'
        self.depth -= 1
        return BencodeList(items)

    def _parse_dict(self):
        """Parses a dictionary from the Bencoded data."""
        self._enter()
        self._consume(1)  # skip 'd'
        obj = {}

        while self._peek() != b'e':
            # keys MUST be text; a repeated key overwrites the earlier one
            key = self._parse_string(validate=True).decode("utf-8")
            obj[key] = self._parse_value()

        self._consume(1)  # skip 'e'
        self.depth -= 1
        return BencodeDict(obj)


def decode(data: bytes):
    """
    Decodes Bencoded data, keeping string values as raw bytes.

    Raises:
        BencodeDecodeError: if the data is not well-formed Bencode.
    """
    return BencodeDecoder(data).decode()


def decode_text(data: bytes):
    """
    Decodes Bencoded data, requiring every string value to be valid UTF-8.

    Raises:
        BencodeDecodeError: if the data is not well-formed Bencode, or
            InvalidUtf8 if a string value is not text.
    """
    return BencodeDecoder(data, text=True).decode()


__all__ = ["BencodeDecoder", "BencodeDecodeError", "DEFAULT_MAX_DEPTH", "decode", "decode_text"]
