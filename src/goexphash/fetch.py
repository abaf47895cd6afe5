"""Remote fetch of packages into the workspace.

The core only ever sees a resolved local directory; fetching is a
collaborator behind the :class:`Fetcher` protocol so tests can substitute it.
"""

import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from goexphash.errors import FetchError
from goexphash.workspace import package_dir

__all__ = ["Fetcher", "GoGetFetcher"]


class Fetcher(Protocol):
    """Something that makes a package available locally."""

    def fetch(self, package_id: str) -> Path:
        """Fetch ``package_id`` and return its local directory."""
        ...


class GoGetFetcher:
    """Fetch packages with ``go get -u -v``.

    Parameters
    ----------
    roots : Sequence[Path]
        Workspace roots; the package lands under the first one.
    verbose : bool, optional
        Show the tool's output instead of discarding it.
    go_binary : str, optional
        Name or path of the ``go`` executable.
    """

    def __init__(
        self,
        roots: Sequence[Path],
        *,
        verbose: bool = False,
        go_binary: str = "go",
    ) -> None:
        if not roots:
            raise FetchError("No workspace root to fetch into")
        self.roots = list(roots)
        self.verbose = verbose
        self.go_binary = go_binary

    def command(self, package_id: str) -> list[str]:
        """Build the fetch command line."""
        return [self.go_binary, "get", "-u", "-v", package_id]

    def fetch(self, package_id: str) -> Path:
        """Run ``go get`` for one package.

        Parameters
        ----------
        package_id : str
            Import path to fetch.

        Returns
        -------
        Path
            Directory of the package under the first workspace root.

        Raises
        ------
        FetchError
            If the tool is missing or exits with a non-zero status.
        """
        output = None if self.verbose else subprocess.DEVNULL
        try:
            subprocess.run(
                self.command(package_id),
                check=True,
                stdout=output,
                stderr=output,
            )
        except FileNotFoundError as e:
            raise FetchError(f"go get err: {self.go_binary} not found") from e
        except subprocess.CalledProcessError as e:
            raise FetchError(f"go get err: {e}") from e

        return package_dir(self.roots[0], package_id)
