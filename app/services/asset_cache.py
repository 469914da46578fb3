import logging
import mimetypes
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Dict, Iterator

from app.errors import NotFound, UpstreamIO
from app.utils import safe_join

logger = logging.getLogger(__name__)

Reader = Callable[[Path], bytes]


class ReadWriteLock:
    """
    Many readers or one writer.
    A waiting writer blocks new readers so inserts are not starved by hits.
    """

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if not self._readers:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class AssetCache:
    """
    Process-wide byte cache for static files under a single root.

    Entries are filled on first read and kept forever; assets are treated as
    immutable while the process runs. Two simultaneous misses for the same
    name may both hit the disk, the later insert wins and both callers get
    the same bytes.
    """

    def __init__(self, root: Path, reader: Reader = Path.read_bytes):
        self.root = Path(root)
        self._reader = reader
        self._entries: Dict[str, bytes] = {}
        self._lock = ReadWriteLock()

    def get(self, filename: str) -> bytes:
        with self._lock.read():
            cached = self._entries.get(filename)
        if cached is not None:
            return cached

        data = self._load(filename)
        with self._lock.write():
            self._entries[filename] = data
        logger.debug(f"Cached asset {filename} ({len(data)} bytes)")
        return data

    def _load(self, filename: str) -> bytes:
        path = safe_join(self.root, filename)
        if path.is_dir():
            raise NotFound(filename, "asset is a directory")
        try:
            return bytes(self._reader(path))
        except (FileNotFoundError, NotADirectoryError):
            raise NotFound(filename, "asset not found")
        except OSError as e:
            logger.error(f"Error reading asset {filename}: {e}")
            raise UpstreamIO(filename, f"failed to read asset: {e}")

    def __contains__(self, filename: str) -> bool:
        with self._lock.read():
            return filename in self._entries

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._entries)


def get_content_type_from_filename(filename: str) -> str:
    """
    Determine content type from file extension
    """
    content_type, _ = mimetypes.guess_type(filename.lower())
    return content_type or "application/octet-stream"
