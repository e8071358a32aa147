import hashlib

from vfs.core.file_hash import DEFAULT_HASH_EXTENSION, FileHash, shard_dir, storage_path


def test_shard_dir_uses_first_three_hex_chars():
    assert shard_dir("d41d8cd98f00b204e9800998ecf8427e") == "d/41"


def test_storage_path_layout():
    h = "d41d8cd98f00b204e9800998ecf8427e"
    assert storage_path(h) == "d/41/d41d8cd98f00b204e9800998ecf8427e.jpg"


def test_storage_path_matches_shard_dir_for_many_hashes():
    for i in range(200):
        h = hashlib.md5(str(i).encode()).hexdigest()
        assert shard_dir(h) == h[0] + "/" + h[1:3]
        assert storage_path(h) == shard_dir(h) + "/" + h + "." + DEFAULT_HASH_EXTENSION


def test_file_hash_is_a_plain_string():
    h = FileHash("0123456789abcdef0123456789abcdef")
    assert h == "0123456789abcdef0123456789abcdef"
    assert h.dir() == "0/12"
    assert h.file().endswith(".jpg")
