#!/usr/bin/env python3
"""Example: Standalone usage of Resource Access.

This example builds a small directory backend and a zip backend that overlap,
then reads and enumerates resources across both.
"""

import tempfile
import zipfile
from pathlib import Path

from resource_access import ResourceRepository, SearchPathLocator, StdoutAuditSink


def build_backends(workdir: Path) -> tuple[Path, Path]:
    """Create a directory tree and an archive holding overlapping resources."""
    tree = workdir / "resources"
    (tree / "io" / "app").mkdir(parents=True)
    (tree / "io" / "app" / "readme.txt").write_text("Readme from the directory.\n")
    (tree / "io" / "app" / "Main.class").write_bytes(b"\xca\xfe\xba\xbe")

    archive = workdir / "bundle.zip"
    with zipfile.ZipFile(archive, "w") as zf:
        zf.writestr("io/app/readme.txt", "Readme from the archive.\n")
        zf.writestr("io/app/data/table.csv", "id,name\n1,alpha\n")

    return tree, archive


def main():
    """Demonstrate standalone usage."""
    print("=" * 60)
    print("Resource Access - Standalone Usage Example")
    print("=" * 60)
    print()

    with tempfile.TemporaryDirectory() as tmpdir:
        tree, archive = build_backends(Path(tmpdir))

        repo = ResourceRepository(
            SearchPathLocator([tree, archive]),
            audit_sink=StdoutAuditSink(),
        )

        print("Resources under io/app (directory first, then archive):")
        for name in repo.list("io/app"):
            print(f"  - {name}")
        print()

        print("Resolved readme (first backend wins):")
        print(repo.get_as_string("io/app/readme.txt", "utf-8"))

        print("CSV resources:")
        for name in repo.list_matching("io/app", r".+\.csv"):
            print(f"  - {name}")
        print()

        path = repo.get_as_path("io/app/data/table.csv")
        print(f"Extracted table to {path}")
        path.unlink()


if __name__ == "__main__":
    main()
