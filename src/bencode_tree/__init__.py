"""
Bencode package for decoding BitTorrent data into a tree of typed values.
"""
from .decoder import DEFAULT_MAX_DEPTH, BencodeDecoder, decode, decode_text
from .errors import (
    BencodeDecodeError,
    InvalidByte,
    InvalidUtf8,
    NestingTooDeep,
    UnexpectedEndOfStream,
)
from .structure import BencodeDict, BencodeInt, BencodeList, BencodeString, BencodeType

__all__ = [
    'decode', 'decode_text', 'BencodeDecoder', 'DEFAULT_MAX_DEPTH',
    'BencodeType', 'BencodeInt', 'BencodeString', 'BencodeList', 'BencodeDict',
    'BencodeDecodeError', 'InvalidByte', 'UnexpectedEndOfStream', 'InvalidUtf8', 'NestingTooDeep',
]
