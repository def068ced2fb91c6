"""Path resolution for tool arguments.

When a sandbox root is configured (APP_PDF_ROOT or APP_FS_ROOT), every
user-supplied path is resolved under it and rejected if it escapes. Without
a root, paths are used exactly as given.
"""

import os

from utils.settings import get_settings


class PathTraversalError(ValueError):
    """Raised when a path resolves outside the sandbox root."""

    pass


def get_pdf_root() -> str | None:
    """Return the configured sandbox root, if any."""
    return get_settings().PDF_ROOT


def resolve_under_root(path: str, *, root: str) -> str:
    """Safely resolve a path under the sandbox root directory.

    Args:
        path: The user-provided path (absolute or relative within the sandbox)
        root: The sandbox root directory

    Returns:
        The fully resolved absolute path within the sandbox

    Raises:
        PathTraversalError: If the resolved path escapes the sandbox
    """
    root = os.path.realpath(root)

    # Strip leading slashes to make path relative
    relative = path.lstrip("/")
    full_path = os.path.normpath(os.path.join(root, relative))

    # realpath handles intermediate symlinks even for non-existent final paths
    resolved_path = os.path.realpath(full_path)

    # Trailing separator prevents prefix attacks (/rootpath vs /root)
    if not resolved_path.startswith(root + os.sep) and resolved_path != root:
        raise PathTraversalError(
            f"Path '{path}' resolves outside the sandbox directory"
        )

    return resolved_path


def resolve_pdf_path(path: str) -> str:
    """Resolve a tool path, applying the sandbox root when one is configured."""
    if not isinstance(path, str) or not path:
        raise ValueError("File path is required")

    root = get_pdf_root()
    if not root:
        return os.path.abspath(path)
    return resolve_under_root(path, root=root)
