from pathlib import Path
import sys
import os

sys.path.append(os.path.join(os.path.dirname(__file__), 'src'))

from bencode_tree import BencodeDecodeError
from torrent_meta import TorrentMeta


def main(argv):
    if len(argv) != 2:
        print(f"usage: {argv[0]} FILE.torrent")
        return 2

    torrent_path = Path(argv[1])
    print(f"[Meta] Loading {torrent_path}")
    try:
        meta = TorrentMeta(torrent_path)
    except BencodeDecodeError as e:
        print(f"[Meta] Malformed bencode → {e!r}")
        return 1
    except (OSError, ValueError) as e:
        print(f"[Meta] Could not load torrent → {e}")
        return 1

    print("name:", meta.name)
    print("announce:", meta.announce)
    print("announce_list:", meta.announce_list)
    print("Computed info_hash:", meta.info_hash.hex())
    print(f"pieces: {meta.num_pieces} x {meta.piece_length} (last {meta.last_piece_length})")
    for f in meta.files:
        print(f"  {f['length']:>12}  {f['path']}")
    print(f"[Meta] Total {meta.total_length} bytes in {len(meta.files)} file(s)")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
