"""File entries: path joining, metadata collection and directory reading."""

from __future__ import annotations

import errno
import os
import stat
from dataclasses import dataclass
from typing import Iterable

PATH_MAX = 4096
_NS_PER_SECOND = 1_000_000_000


@dataclass(frozen=True)
class FileEntry:
    """Metadata of one listed file, as returned by ``lstat``."""

    name: str
    path: str = ""
    mode: int = 0
    nlink: int = 0
    uid: int = 0
    gid: int = 0
    size: int = 0
    rdev: int = 0
    mtime: int = 0
    mtime_ns: int = 0
    blocks: int = 0

    @property
    def is_dir(self) -> bool:
        return stat.S_ISDIR(self.mode)

    @classmethod
    def from_stat(cls, name: str, path: str, st: os.stat_result) -> "FileEntry":
        seconds, nanoseconds = divmod(st.st_mtime_ns, _NS_PER_SECOND)
        return cls(
            name=name,
            path=path,
            mode=st.st_mode,
            nlink=st.st_nlink,
            uid=st.st_uid,
            gid=st.st_gid,
            size=st.st_size,
            rdev=getattr(st, "st_rdev", 0),
            mtime=seconds,
            mtime_ns=nanoseconds,
            blocks=getattr(st, "st_blocks", 0),
        )


def join_path(directory: str, name: str) -> str:
    """Join ``directory`` and ``name`` with a single separator.

    Raises ``OSError`` with ``ENAMETOOLONG`` when the result would not fit
    in a path buffer.
    """
    if directory and not directory.endswith("/"):
        full = f"{directory}/{name}"
    else:
        full = f"{directory}{name}"
    if len(full) >= PATH_MAX - 1:
        raise OSError(errno.ENAMETOOLONG, os.strerror(errno.ENAMETOOLONG), name)
    return full


def stat_entry(directory: str, name: str) -> FileEntry:
    """Build the entry for ``name`` inside ``directory`` without following links."""
    full = join_path(directory, name)
    return FileEntry.from_stat(name, full, os.lstat(full))


def read_directory(path: str, show_hidden: bool) -> list[FileEntry]:
    """Return the entries of a directory.

    Names starting with a dot are skipped unless ``show_hidden`` is set, in
    which case ``.`` and ``..`` are included too. Entries whose metadata
    cannot be read are left out; failing to open the directory raises.
    """
    names = os.listdir(path)
    if show_hidden:
        names = [".", "..", *names]
    else:
        names = [name for name in names if not name.startswith(".")]
    entries = []
    for name in names:
        try:
            entries.append(stat_entry(path, name))
        except OSError:
            continue
    return entries


def longest_name(entries: Iterable[FileEntry]) -> int:
    """Length of the longest entry name, 0 for no entries."""
    return max((len(entry.name) for entry in entries), default=0)


def sort_names(names: Iterable[str]) -> list[str]:
    """Sort names by their byte values, keeping equal names in order."""
    return sorted(names, key=os.fsencode)