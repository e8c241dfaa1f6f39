"""
Git Fetcher

Clones license repositories with the git CLI into temporary directories.
"""

import logging
import shutil
import subprocess
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional

from licensedb.core.config import settings
from licensedb.core.exceptions import PathLike, RemoteFetchFailed

logger = logging.getLogger(__name__)


def is_git_available(executable: Optional[str] = None) -> bool:
    """Check if the git CLI is available in the system PATH."""
    return shutil.which(executable or settings.GIT_EXECUTABLE) is not None


def _build_clone_args(url: str, destination: PathLike, depth: Optional[int]) -> List[str]:
    args = [settings.GIT_EXECUTABLE, "clone", "--quiet"]
    if depth:
        args += ["--depth", str(depth)]
    args += [url, str(destination)]
    return args


def clone_repository(
    url: str,
    destination: PathLike,
    depth: Optional[int] = None,
    timeout: Optional[float] = None,
) -> Path:
    """
    Clone a git repository.

    Args:
        url: Repository URL (any transport git understands)
        destination: Empty or missing directory to clone into
        depth: History depth, defaults to settings.GIT_CLONE_DEPTH
        timeout: Seconds before the clone is aborted, defaults to settings.GIT_CLONE_TIMEOUT

    Returns:
        Path of the working copy

    Raises:
        RemoteFetchFailed: git is missing, the clone failed or timed out
    """
    if not is_git_available():
        raise RemoteFetchFailed(url, f"git executable '{settings.GIT_EXECUTABLE}' not found in PATH")

    depth = settings.GIT_CLONE_DEPTH if depth is None else depth
    timeout = settings.GIT_CLONE_TIMEOUT if timeout is None else timeout
    args = _build_clone_args(url, destination, depth)

    logger.info(f"Cloning {url}")
    try:
        process = subprocess.run(args, capture_output=True, text=True, timeout=timeout, check=False)
    except subprocess.TimeoutExpired as e:
        logger.error(f"Clone of {url} timed out after {timeout}s")
        raise RemoteFetchFailed(url, e) from e
    except OSError as e:
        logger.error(f"Could not run git for {url}: {e}")
        raise RemoteFetchFailed(url, e) from e

    if process.returncode != 0:
        error_msg = (process.stderr or "").strip() or f"git exited with status {process.returncode}"
        logger.error(f"Clone of {url} failed: {error_msg}")
        raise RemoteFetchFailed(url, error_msg)

    return Path(destination)


@contextmanager
def temporary_clone(url: str, depth: Optional[int] = None, timeout: Optional[float] = None) -> Iterator[Path]:
    """
    Clone a repository into a temporary directory for the duration of a with-block.

    Usage:
        with temporary_clone("https://github.com/nexB/scancode-licensedb.git") as root:
            records = import_directory(root / "docs")

    The directory is removed on exit, also when the block raises.
    """
    with tempfile.TemporaryDirectory(prefix="licensedb-") as workdir:
        checkout = Path(workdir) / "repository"
        yield clone_repository(url, checkout, depth=depth, timeout=timeout)
