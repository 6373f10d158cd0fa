"""Output file handling.

Outputs are replaced whole: the new content goes to a temporary file next
to the destination, which is then renamed over it. A reader never sees a
half-written file, and a failure before the rename leaves the old file.
"""

import os
import stat
import tempfile
from pathlib import Path


def ensure_dir(path: Path) -> None:
    """Create a directory and its parents. No-op if it exists."""
    os.makedirs(path, exist_ok=True)


def remove_if_exists(path: Path) -> bool:
    """Delete a file. A missing file is not an error. Returns True if deleted."""
    try:
        os.remove(path)
    except FileNotFoundError:
        return False
    return True


def _target_mode(path: Path) -> int:
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        pass
    # umask can only be read by setting it
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_output(path: Path, content: str | bytes) -> int:
    """Replace `path` with `content`. Returns the number of bytes written."""
    path = Path(path)
    ensure_dir(path.parent)
    data = content.encode('utf-8') if isinstance(content, str) else content

    fd, tmp_name = tempfile.mkstemp(prefix=f'.{path.name}.', suffix='.tmp', dir=path.parent)
    try:
        with os.fdopen(fd, 'wb') as f:
            f.write(data)
        # mkstemp creates 0600; keep the destination's mode, else what open() would give
        os.chmod(tmp_name, _target_mode(path))
        os.replace(tmp_name, path)
    except BaseException:
        remove_if_exists(Path(tmp_name))
        raise
    return len(data)
