# ubergallery/utils/file_helpers.py
"""
Filesystem helpers shared by the thumbnail cache and the gallery listing.
"""

import os
import tempfile
from pathlib import Path, PurePosixPath, PureWindowsPath
from typing import Union
from urllib.parse import quote

from ..constants import TEMP_ARTIFACT_PREFIX

# Permissions for published artifacts; mkstemp creates files as 0600
ARTIFACT_FILE_MODE = 0o644


def is_plain_filename(filename: str) -> bool:
    """
    Check that a name refers to a single entry directly inside a directory.

    Rejects empty names, "." and "..", anything containing a path separator
    and NUL bytes, so joining it onto a directory can never escape that
    directory. Separators follow the host platform: on POSIX a backslash or
    drive prefix ("a\\b.jpg", "c:foo.jpg") is an ordinary file name character.

    Args:
        filename: Candidate file name

    Returns:
        True if the name is a bare file name
    """
    if not filename or filename in (".", ".."):
        return False
    if "\x00" in filename:
        return False
    if PurePosixPath(filename).name != filename:
        return False
    if os.name == "nt":
        return PureWindowsPath(filename).name == filename
    return True


def atomic_write_bytes(path: Path, data: bytes) -> None:
    """
    Write bytes so that readers see either no file or the complete file.

    Data goes to a temp file in the destination directory, is flushed to disk
    and then renamed over the destination. The temp file is removed if any
    step fails.

    Args:
        path: Destination file path
        data: Bytes to write

    Raises:
        OSError: If the directory, temp file, write or rename fails
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, temp_name = tempfile.mkstemp(
        dir=path.parent, prefix=TEMP_ARTIFACT_PREFIX, suffix=path.suffix
    )
    try:
        with os.fdopen(fd, "wb") as temp_file:
            temp_file.write(data)
            temp_file.flush()
            os.fsync(temp_file.fileno())
        os.chmod(temp_name, ARTIFACT_FILE_MODE)
        os.replace(temp_name, path)
    except BaseException:
        try:
            os.unlink(temp_name)
        except FileNotFoundError:
            pass
        raise


def to_public_url(path: Union[str, Path], public_root: Path, url_prefix: str) -> str:
    """
    Convert a path under the public root into its URL.

    Args:
        path: File path under ``public_root``
        public_root: Directory served at ``url_prefix``
        url_prefix: URL prefix, e.g. "/public"

    Returns:
        URL path with forward slashes

    Raises:
        ValueError: If the path is not under the public root
    """
    # abspath, not resolve: symlinked gallery entries keep their public location
    relative = Path(os.path.abspath(path)).relative_to(os.path.abspath(public_root))
    return f"{url_prefix.rstrip('/')}/{quote(relative.as_posix())}"
