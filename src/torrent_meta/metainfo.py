import hashlib
from pathlib import Path
from typing import List, Optional

from bencode_tree import BencodeDecodeError, BencodeDecoder, decode

INFO_KEY = b"4:info"
HASH_LEN = 20


def extract_info_bytes(raw: bytes, info) -> bytes:
    """
    Extract the exact bencoded 'info' dictionary byte slice.
    This guarantees correct SHA-1 infohash as required by BitTorrent spec.

    ``info`` is the already decoded value; a candidate slice is accepted only
    if it decodes back to it, so a "4:info" inside another string is skipped.
    """
    start = raw.find(INFO_KEY)
    while start != -1:
        value_start = start + len(INFO_KEY)
        decoder = BencodeDecoder(raw, value_start)
        try:
            if decoder.decode() == info:
                return raw[value_start:decoder.pos]
        except BencodeDecodeError:
            pass  # not a key position
        start = raw.find(INFO_KEY, start + 1)

    raise ValueError("Torrent missing 'info' dictionary")


def _require(mapping, key: str, kind: str):
    node = mapping.get(key)
    value = getattr(node, f"as_{kind}")() if node is not None else None
    if value is None:
        raise ValueError(f"Torrent field {key!r} missing or not a {kind}")
    return value


class TorrentMeta:
    """
    Parsed .torrent metainfo.

    Attributes:
        announce: tracker url, or None
        announce_list: tiers of tracker urls, or None
        name: suggested file or directory name
        piece_length: nominal piece size in bytes
        pieces: list of 20-byte SHA-1 digests, one per piece
        files: list of {"length", "path"} dicts
        info_hash: SHA-1 of the bencoded info dictionary
    """
    def __init__(self, path: Path):
        self.path = Path(path)

        # Load raw bytes
        raw = self.path.read_bytes()

        # Decode keeping strings raw; 'pieces' is binary
        root = decode(raw).as_dict()
        if root is None:
            raise ValueError("Invalid torrent: root must be a dictionary")
        self.data = root

        # ------------------ INFO ------------------
        info_b = root.get("info")
        if info_b is None or info_b.as_dict() is None:
            raise ValueError("Torrent missing 'info' dictionary")
        self.info = info_b.as_dict()

        self.info_bytes = extract_info_bytes(raw, info_b)
        self.info_hash = hashlib.sha1(self.info_bytes).digest()

        # ------------------ NAME ------------------
        name_b = self.info.get("name")
        self.name: Optional[str] = name_b.as_text() if name_b is not None else None

        # ------------------ ANNOUNCE URL ------------------
        ann_b = root.get("announce")
        self.announce: Optional[str] = ann_b.as_text() if ann_b is not None else None

        # ------------------ ANNOUNCE-LIST ------------------
        self.announce_list: Optional[List[List[str]]] = None
        ann_list_b = root.get("announce-list")

        if ann_list_b is not None and ann_list_b.as_list() is not None:
            tiers = []
            for tier in ann_list_b.as_list():
                urls = [u.as_text() for u in (tier.as_list() or ()) if u.as_text() is not None]
                if urls:
                    tiers.append(urls)
            if tiers:
                self.announce_list = tiers

        # ------------------ PIECE LENGTH ------------------
        self.piece_length = _require(self.info, "piece length", "int")
        if self.piece_length <= 0:
            raise ValueError("Torrent 'piece length' must be positive")

        # ------------------ PIECES ------------------
        raw_pieces = _require(self.info, "pieces", "bytes")
        if len(raw_pieces) % HASH_LEN:
            raise ValueError("Torrent 'pieces' is not a multiple of 20 bytes")
        self.pieces = [raw_pieces[i:i+HASH_LEN] for i in range(0, len(raw_pieces), HASH_LEN)]

        # ------------------ FILES ------------------
        self.is_multi = "files" in self.info
        if self.is_multi:
            self.files = []
            for f_entry in _require(self.info, "files", "list"):
                entry = f_entry.as_dict()
                if entry is None:
                    raise ValueError("Torrent 'files' entry is not a dictionary")
                length = _require(entry, "length", "int")
                parts = [p.as_text() for p in _require(entry, "path", "list")]
                if not parts or None in parts:
                    raise ValueError("Torrent 'files' entry has an invalid path")
                self.files.append({"length": length, "path": "/".join(parts)})
        else:
            if self.name is None:
                raise ValueError("Torrent field 'name' missing or not a text")
            length = _require(self.info, "length", "int")
            self.files = [{"length": length, "path": self.name}]

        self.is_single = not self.is_multi
        self.total_length = sum(f["length"] for f in self.files)
        self.num_pieces = len(self.pieces)
        self.last_piece_length = (self.total_length % self.piece_length) or self.piece_length

    def __repr__(self):
        return (
            f"TorrentMeta(name={self.name!r}, files={len(self.files)}, pieces={self.num_pieces}, "
            f"multi={self.is_multi}, announce={self.announce!r})"
        )
