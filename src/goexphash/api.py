"""Public API for fingerprinting Go packages.

This module provides the main public API for goexphash, enabling:
- Fingerprinting a package found in the workspace roots (optionally fetched)
- Fingerprinting a package directory
- Fingerprinting in-memory Go sources
"""

from collections.abc import Mapping
from pathlib import Path

from goexphash.audit import AuditLogger
from goexphash.engine import HashConfig, HashResult, hash_directory, hash_parsed_files
from goexphash.fetch import Fetcher, GoGetFetcher
from goexphash.parse import parse_source
from goexphash.parse.base import TEST_FILE_SUFFIX
from goexphash.workspace import resolve_package_dir, workspace_roots

__all__ = [
    "resolve_package",
    "hash_package",
    "hash_directory",
    "hash_sources",
]


def resolve_package(
    package_id: str,
    config: HashConfig | None = None,
    *,
    environ: Mapping[str, str] | None = None,
    fetcher: Fetcher | None = None,
) -> Path:
    """Locate (and with ``config.download``, first fetch) a package directory.

    Parameters
    ----------
    package_id : str
        Import path of the package.
    config : HashConfig | None, optional
        Run configuration, defaults to ``HashConfig()``.
    environ : Mapping[str, str] | None, optional
        Environment mapping, defaults to ``os.environ``.
    fetcher : Fetcher | None, optional
        Fetch collaborator used when downloading. Defaults to a
        :class:`GoGetFetcher` over the workspace roots.

    Returns
    -------
    Path
        Local package directory.

    Raises
    ------
    ConfigurationError
        If the workspace roots are not configured.
    FetchError
        If downloading fails.
    ResolutionError
        If the package directory cannot be found.
    """
    config = config or HashConfig()
    roots = workspace_roots(environ, config.gopath_env)

    if config.download:
        if fetcher is None:
            fetcher = GoGetFetcher(roots, verbose=config.verbose)
        return fetcher.fetch(package_id)

    return resolve_package_dir(package_id, roots)


def hash_package(
    package_id: str,
    *,
    config: HashConfig | None = None,
    environ: Mapping[str, str] | None = None,
    fetcher: Fetcher | None = None,
    logger: AuditLogger | None = None,
) -> HashResult:
    """Fingerprint the exported API of a workspace package.

    Parameters
    ----------
    package_id : str
        Import path of the package (e.g. ``github.com/user/repo/pkg``).
    config : HashConfig | None, optional
        Run configuration, defaults to ``HashConfig()``.
    environ : Mapping[str, str] | None, optional
        Environment mapping, defaults to ``os.environ``.
    fetcher : Fetcher | None, optional
        Fetch collaborator used when ``config.download`` is set.
    logger : AuditLogger | None, optional
        Audit logger for structured events.

    Returns
    -------
    HashResult
        Fingerprint, entries and supporting data.

    Examples
    --------
    Fingerprint a package below ``$GOPATH/src``:

        >>> from goexphash import hash_package
        >>> result = hash_package("github.com/user/repo/pkg")
        >>> print(result.fingerprint)
    """
    config = config or HashConfig()
    directory = resolve_package(package_id, config, environ=environ, fetcher=fetcher)
    return hash_directory(directory, config=config, logger=logger)


def hash_sources(
    sources: Mapping[str, bytes | str],
    *,
    config: HashConfig | None = None,
) -> HashResult:
    """Fingerprint Go sources held in memory.

    Parameters
    ----------
    sources : Mapping[str, bytes | str]
        File name to file content. Names ending in ``_test.go`` are
        skipped, as when hashing a directory.
    config : HashConfig | None, optional
        Run configuration, defaults to ``HashConfig()``.

    Returns
    -------
    HashResult
        Fingerprint, entries and supporting data.

    Examples
    --------
        >>> from goexphash import hash_sources
        >>> hash_sources({"a.go": "package a\\n\\nconst Bar = 1\\n"}).descriptors
        ['const Bar = 1']
    """
    parsed = [
        parse_source(source, filename=name)
        for name, source in sources.items()
        if not name.endswith(TEST_FILE_SUFFIX)
    ]
    return hash_parsed_files(parsed, config)
