"""
Data structures for representing decoded Bencode values.

Every decoded tree is built from the four classes below. Callers walk the
tree through the ``as_*`` accessors, which return ``None`` on a tag mismatch
instead of raising.
"""
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

__all__ = [
    "BencodeType",
    "BencodeInt",
    "BencodeString",
    "BencodeList",
    "BencodeDict",
]


class BencodeType:
    """Base class for all Bencode data types."""

    def as_int(self) -> Optional[int]:
        return None

    def as_bytes(self) -> Optional[bytes]:
        return None

    def as_text(self) -> Optional[str]:
        return None

    def as_list(self) -> Optional[Tuple["BencodeType", ...]]:
        return None

    def as_dict(self) -> Optional[Mapping[str, "BencodeType"]]:
        return None

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self.value == other.value

    def __repr__(self):
        return f"{type(self).__name__}({self.value!r})"


class BencodeInt(BencodeType):
    """Represents a Bencoded integer."""

    def __init__(self, value: int):
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError("BencodeInt requires an integer.")
        self.value = value

    def as_int(self) -> Optional[int]:
        return self.value

    def __repr__(self):
        return f"BencodeInt({self.value})"


class BencodeString(BencodeType):
    """Represents a Bencoded byte string."""

    def __init__(self, value: bytes):
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise TypeError("BencodeString requires bytes.")
        self.value = bytes(value)

    def as_bytes(self) -> Optional[bytes]:
        return self.value

    def as_text(self) -> Optional[str]:
        try:
            return self.value.decode("utf-8")
        except UnicodeDecodeError:
            return None


class BencodeList(BencodeType):
    """Represents a Bencoded list."""

    def __init__(self, value):
        if not isinstance(value, (list, tuple)):
            raise TypeError("BencodeList requires a list.")
        for item in value:
            if not isinstance(item, BencodeType):
                raise TypeError("BencodeList items must be Bencode values.")
        self.value = tuple(value)

    def as_list(self) -> Optional[Tuple[BencodeType, ...]]:
        return self.value


class BencodeDict(BencodeType):
    """Represents a Bencoded dictionary."""

    def __init__(self, value: dict):
        if not isinstance(value, dict):
            raise TypeError("BencodeDict requires a dict.")
        # keys are text, values are decoded nodes
        for k, v in value.items():
            if not isinstance(k, str):
                raise TypeError("BencodeDict keys must be str.")
            if not isinstance(v, BencodeType):
                raise TypeError("BencodeDict values must be Bencode values.")
        self.value = MappingProxyType(dict(value))

    def as_dict(self) -> Optional[Mapping[str, BencodeType]]:
        return self.value

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return dict(self.value) == dict(other.value)

    def __repr__(self):
        return f"BencodeDict({dict(self.value)!r})"
