"""
Thin binding over the native MediaInfo library.

pymediainfo locates and loads the shared library (bundled with its wheels
or installed system-wide) and declares the prototypes it needs itself.
The per-stream query calls are declared here on top of that.
"""
import ctypes
import logging
from pathlib import Path
from typing import Any, Optional, Tuple

from . import config
from .exceptions import FileOpenError, LibraryLoadError
from .models import StreamKind

# Type hint 'Any' keeps Pylance quiet about "None" having no attribute "_get_library"
MediaInfo: Any = None
try:
    from pymediainfo import MediaInfo
except ImportError:
    MediaInfo = None


def _define_query_prototypes(lib: Any) -> Any:
    lib.MediaInfo_Get.argtypes = [
        ctypes.c_void_p, ctypes.c_int, ctypes.c_size_t,
        ctypes.c_wchar_p, ctypes.c_int, ctypes.c_int,
    ]
    lib.MediaInfo_Get.restype = ctypes.c_wchar_p
    lib.MediaInfo_Count_Get.argtypes = [ctypes.c_void_p, ctypes.c_int, ctypes.c_size_t]
    lib.MediaInfo_Count_Get.restype = ctypes.c_size_t
    return lib


def load_native(library_file: Optional[str] = None) -> Tuple[Any, Any, str]:
    """
    Loads libmediainfo through pymediainfo.

    Returns:
        (lib, handle, version_string)
    """
    if MediaInfo is None:
        raise LibraryLoadError("pymediainfo is not installed")
    try:
        lib, handle, version_str, _ = MediaInfo._get_library(library_file)
    except OSError as e:
        raise LibraryLoadError(str(e)) from e
    return _define_query_prototypes(lib), handle, version_str


class MediaInfoLibrary:
    """
    One MediaInfo handle with one media file opened on it.

    Use as a context manager so the handle is released on every exit path:

        with MediaInfoLibrary(path) as mi:
            mi.count(StreamKind.AUDIO)
    """

    def __init__(self, path: Path, library_file: Optional[str] = None):
        self.path = Path(path)
        self.library_file = library_file
        self.version: Optional[str] = None
        self._lib: Any = None
        self._handle: Any = None
        self._opened = False

    def open(self) -> "MediaInfoLibrary":
        if self._opened:
            return self

        # MediaInfo reports a missing file the same way as an unknown format
        if not self.path.is_file():
            raise FileOpenError(f"{self.path}: no such file")

        self._lib, self._handle, self.version = load_native(self.library_file)
        logging.debug(f"Loaded MediaInfoLib v{self.version}")

        if self._lib.MediaInfo_Open(self._handle, str(self.path)) == 0:
            self.close()
            raise FileOpenError(f"{self.path}: not readable or not a recognized media format")

        self._opened = True
        logging.debug(f"Opened {self.path}")
        return self

    def close(self):
        if self._lib is None:
            return
        if self._opened:
            self._lib.MediaInfo_Close(self._handle)
            self._opened = False
            logging.debug(f"Closed {self.path}")
        self._lib.MediaInfo_Delete(self._handle)
        self._lib = None
        self._handle = None

    def __enter__(self):
        return self.open()

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    # --- Queries ---

    def option(self, name: str, value: str = "") -> str:
        return self._lib.MediaInfo_Option(self._handle, name, value) or ""

    def parameter_catalog_text(self) -> str:
        """Returns the category-sectioned list of every parameter MediaInfo knows."""
        return self.option(config.INFO_PARAMETERS_OPTION)

    def count(self, kind: StreamKind) -> int:
        """Number of stream instances of the given kind in the opened file."""
        all_streams = ctypes.c_size_t(config.COUNT_ALL_STREAMS).value
        return int(self._lib.MediaInfo_Count_Get(self._handle, kind.value, all_streams))

    def get(self, kind: StreamKind, index: int, key: str) -> str:
        """Value of one parameter for one stream instance; empty if unavailable."""
        val = self._lib.MediaInfo_Get(
            self._handle, kind.value, index, key, config.INFO_TEXT, config.INFO_NAME
        )
        return val or ""
