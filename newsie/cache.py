"""
Read-state cache.

Read posts are remembered as SHA-1 digests of their titles, one hex digest per
line in an append-only file under the invoking user's ~/.cache/newsie/. Nothing
in the file is ever rewritten; marking a post twice just adds a duplicate line.

newsie is typically run from a pacman hook under sudo, so the cache location and
ownership follow the real user (SUDO_USER) rather than root.
"""
from __future__ import annotations

import hashlib
import logging
import os
import pwd
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Set, Union

from .exceptions import CacheBootstrapError, CacheLoadError, CacheWriteError

logger = logging.getLogger(__name__)

CACHE_SUBDIR = Path(".cache") / "newsie"
CACHE_FILENAME = "cache"
DIR_MODE = 0o755
FILE_MODE = 0o644


def hash_title(title: str) -> str:
    return hashlib.sha1(title.encode("utf-8")).hexdigest()


@dataclass(frozen=True)
class CacheOwner:
    name: str
    uid: int
    gid: int
    home: Path


def resolve_cache_owner(environ: Optional[Mapping[str, str]] = None) -> CacheOwner:
    """
    Return the user the cache belongs to: SUDO_USER when running as root under
    sudo, otherwise the real user of the process.

    Raises KeyError when the user is unknown to the password database.
    """
    env = os.environ if environ is None else environ
    sudo_user = env.get("SUDO_USER")
    if os.geteuid() == 0 and sudo_user and sudo_user != "root":
        entry = pwd.getpwnam(sudo_user)
    else:
        entry = pwd.getpwuid(os.getuid())
    return CacheOwner(
        name=entry.pw_name,
        uid=entry.pw_uid,
        gid=entry.pw_gid,
        home=Path(entry.pw_dir),
    )


def bootstrap_cache(
    cache_dir: Optional[Union[str, Path]] = None,
    owner: Optional[CacheOwner] = None,
) -> Path:
    """
    Make sure the cache directory and file exist and return the file's path.

    Anything created here is handed to the invoking user, including missing parent
    directories, so a first run under sudo does not leave root-owned files in the
    user's home.
    """
    try:
        owner = owner or resolve_cache_owner()
        directory = Path(cache_dir) if cache_dir else owner.home / CACHE_SUBDIR
        path = directory / CACHE_FILENAME

        missing = [d for d in (directory, *directory.parents) if not d.exists()]
        for d in reversed(missing):
            d.mkdir(mode=DIR_MODE)
            os.chown(d, owner.uid, owner.gid)

        if not path.exists():
            path.touch(mode=FILE_MODE)
            os.chown(path, owner.uid, owner.gid)
            logger.info("Created cache %s for %s", path, owner.name)
    except KeyError as e:
        raise CacheBootstrapError(f"Unknown user {e}") from e
    except OSError as e:
        raise CacheBootstrapError(f"Cannot prepare cache: {e}") from e
    return path


class ReadStateCache:
    """Set of read title hashes backed by an append-only file."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        self._hashes: Set[str] = set()

    @classmethod
    def open(cls, path: Union[str, Path]) -> "ReadStateCache":
        cache = cls(path)
        cache.load()
        return cache

    def load(self) -> Set[str]:
        """
        Replace the in-memory set with every line of the backing file.

        A trailing newline yields an empty entry, which never matches a digest.
        """
        try:
            contents = self.path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            raise CacheLoadError(f"Cannot read cache {self.path}: {e}") from e
        self._hashes = set(contents.split("\n"))
        return set(self._hashes)

    def is_read(self, title: str) -> bool:
        return hash_title(title) in self._hashes

    def mark_read(self, title: str) -> None:
        """
        Append the title's hash to the backing file, then remember it in memory.

        The in-memory set is only updated once the line has been written.
        """
        digest = hash_title(title)
        try:
            with self.path.open("a", encoding="utf-8") as f:
                f.write(digest + "\n")
        except OSError as e:
            raise CacheWriteError(f"Cannot write cache {self.path}: {e}") from e
        self._hashes.add(digest)
