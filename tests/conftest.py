"""Pytest configuration and shared fixtures."""

import struct
import tempfile
import zipfile
from pathlib import Path
from typing import Callable, Generator

import pytest


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def make_archive(temp_dir: Path) -> Callable[[str, dict], Path]:
    """Return a factory that writes a zip archive with the given entries.

    Entries are written in insertion order. Names ending in '/' become
    directory entries.
    """
    def factory(filename: str, entries: dict) -> Path:
        archive_path = temp_dir / filename
        with zipfile.ZipFile(archive_path, "w") as archive:
            for name, content in entries.items():
                archive.writestr(name, content)
        return archive_path

    return factory


@pytest.fixture
def tree_backend(temp_dir: Path) -> Path:
    """Create a plain directory backend."""
    root = temp_dir / "classes"
    app = root / "io" / "app"
    (app / "conf").mkdir(parents=True)

    (root / "root.txt").write_text("This is the root test resource.\n")
    (app / "readme.txt").write_text("tree readme\n")
    (app / "conf" / "settings.yaml").write_text("debug: true\n")
    (app / "Main.class").write_bytes(b"\xca\xfe\xba\xbe")
    (app / "module.pyc").write_bytes(b"\x00\x01")

    return root


@pytest.fixture
def archive_backend(make_archive) -> Path:
    """Create an archive backend that overlaps the directory backend."""
    return make_archive("lib.zip", {
        "io/": "",
        "io/app/": "",
        "io/app/readme.txt": "archive readme\n",
        "io/app/extra/data.bin": b"\x00\xff\x10",
        "root.txt": "This is the root test resource in an archive.\n",
        "other/ignored.txt": "not under io/app\n",
    })


@pytest.fixture
def damaged_archive(temp_dir: Path) -> Callable[[str], Path]:
    """Return a factory for archives whose io/app/readme.txt member is damaged.

    Damage kinds:
        payload: compressed data that no longer inflates
        crc: stored data whose CRC-32 no longer matches
        method: an unsupported compression method
        encrypted: an encrypted member with no password available
    """
    name = "io/app/readme.txt"
    content = b"archive readme\n" * 64

    def factory(kind: str) -> Path:
        archive_path = temp_dir / f"damaged-{kind}.zip"
        compression = zipfile.ZIP_DEFLATED if kind == "payload" else zipfile.ZIP_STORED
        with zipfile.ZipFile(archive_path, "w") as archive:
            archive.writestr("io/app/intact.txt", b"intact\n")
            archive.writestr(name, content, compress_type=compression)

        with zipfile.ZipFile(archive_path) as archive:
            info = archive.getinfo(name)

        data = bytearray(archive_path.read_bytes())
        local = info.header_offset
        name_len, extra_len = struct.unpack_from("<HH", data, local + 26)
        start = local + 30 + name_len + extra_len
        central = data.find(b"PK\x01\x02")
        while data[central + 46:central + 46 + len(name)] != name.encode():
            central = data.find(b"PK\x01\x02", central + 1)

        if kind in ("payload", "crc"):
            # 0xff starts a deflate block of the reserved type
            fill = b"\xff" if kind == "payload" else b"X"
            data[start:start + info.compress_size] = fill * info.compress_size
        elif kind == "method":
            struct.pack_into("<H", data, local + 8, 99)
            struct.pack_into("<H", data, central + 10, 99)
        elif kind == "encrypted":
            for flag_offset in (local + 6, central + 8):
                (flags,) = struct.unpack_from("<H", data, flag_offset)
                struct.pack_into("<H", data, flag_offset, flags | 0x1)
        else:
            raise ValueError(f"Unknown damage kind: {kind}")

        archive_path.write_bytes(bytes(data))
        return archive_path

    return factory
