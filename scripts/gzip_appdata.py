#!/usr/bin/env python3
"""Gzip compress JS and CSS assets in every app data folder."""
import gzip
import pathlib
import shutil
from typing import Optional

from appassets.config import get_appdata_root

SUFFIXES = {'.js', '.css'}


def gzip_file(path: pathlib.Path) -> pathlib.Path:
    gz_path = path.with_suffix(path.suffix + '.gz')
    with path.open('rb') as src, gzip.open(gz_path, 'wb') as dst:
        shutil.copyfileobj(src, dst)
    return gz_path


def main(root: Optional[pathlib.Path] = None) -> list[pathlib.Path]:
    root = root or get_appdata_root()
    written = []
    for path in sorted(root.rglob('*')):
        if path.is_file() and path.suffix in SUFFIXES:
            written.append(gzip_file(path))
            print(f'Compressed {path}')
    return written


if __name__ == '__main__':
    import argparse

    parser = argparse.ArgumentParser(description="Write .gz variants of app assets")
    parser.add_argument("root", nargs="?", type=pathlib.Path, help="App data root")
    args = parser.parse_args()
    main(args.root)
