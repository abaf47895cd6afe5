"""Workspace lookup of package directories.

A package identifier ``P`` lives at ``<root>/src/P`` under one of the
workspace roots listed in ``GOPATH``; the first root holding it wins.
"""

import errno
import os
import stat
from collections.abc import Mapping, Sequence
from pathlib import Path

from goexphash.errors import ConfigurationError, ResolutionError

__all__ = ["GOPATH_ENV", "workspace_roots", "package_dir", "resolve_package_dir"]

GOPATH_ENV = "GOPATH"


def workspace_roots(
    environ: Mapping[str, str] | None = None,
    env_var: str = GOPATH_ENV,
) -> list[Path]:
    """Read the workspace roots from the environment.

    Parameters
    ----------
    environ : Mapping[str, str] | None, optional
        Environment mapping, defaults to ``os.environ``.
    env_var : str, optional
        Variable holding the roots, by default ``GOPATH``.

    Returns
    -------
    list[Path]
        Roots in search order. Empty entries are ignored.

    Raises
    ------
    ConfigurationError
        If the variable is unset or lists no usable root.
    """
    if environ is None:
        environ = os.environ

    value = environ.get(env_var)
    if value is None:
        raise ConfigurationError(f"{env_var} environment variable is not set")

    roots = [Path(entry) for entry in value.split(os.pathsep) if entry]
    if not roots:
        raise ConfigurationError(f"{env_var} does not list any workspace root")
    return roots


def package_dir(root: Path, package_id: str) -> Path:
    """Return the directory of ``package_id`` under one workspace root."""
    return Path(root) / "src" / package_id


def resolve_package_dir(package_id: str, roots: Sequence[Path]) -> Path:
    """Find the directory of a package in the workspace roots.

    Parameters
    ----------
    package_id : str
        Import path of the package (e.g. ``github.com/user/repo/pkg``).
    roots : Sequence[Path]
        Workspace roots in search order.

    Returns
    -------
    Path
        Directory of the package under the first root that holds it.

    Raises
    ------
    ResolutionError
        If the package is not found, a candidate is not a directory, or a
        root cannot be inspected.
    """
    if not package_id:
        raise ResolutionError("Package identifier is empty")

    for root in roots:
        candidate = package_dir(root, package_id)
        try:
            mode = candidate.stat().st_mode
        except FileNotFoundError:
            continue
        except OSError as e:
            if e.errno == errno.ENOTDIR:
                continue
            raise ResolutionError(f"Cannot inspect {candidate}: {e}") from e
        if not stat.S_ISDIR(mode):
            raise ResolutionError(f"{candidate} is not a directory")
        return candidate

    searched = ", ".join(str(r) for r in roots)
    raise ResolutionError(f"Package {package_id} not found in workspace roots: {searched}")
