"""
Torrent metainfo reader built on the bencode_tree accessors.
"""
from .metainfo import TorrentMeta, extract_info_bytes

__all__ = ['TorrentMeta', 'extract_info_bytes']
