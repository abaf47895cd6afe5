"""Run configuration and result dataclasses."""

from dataclasses import asdict, dataclass, field
from typing import Any

from goexphash.models import CanonicalEntry
from goexphash.parse import FileIngestionResult


@dataclass
class HashConfig:
    """Configuration for one fingerprint run.

    Passed explicitly into every stage that needs it; nothing is read from
    process-wide state.

    Attributes
    ----------
    verbose : bool
        Show progress diagnostics and fetch tool output.
    print_descriptors : bool
        Emit each canonical entry (as a ``descriptor`` audit event, and on
        stderr from the CLI) before hashing.
    download : bool
        Fetch the package with ``go get`` before hashing.
    gopath_env : str
        Name of the environment variable holding the workspace roots.
    """

    verbose: bool = False
    print_descriptors: bool = False
    download: bool = False
    gopath_env: str = "GOPATH"

    def __post_init__(self) -> None:
        """Validate configuration."""
        if not self.gopath_env:
            raise ValueError("gopath_env must be a non-empty environment variable name")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)


@dataclass
class HashResult:
    """Outcome of one fingerprint run.

    Attributes
    ----------
    fingerprint : str
        Lowercase hex SHA-512/256 digest; the only hashed output.
    entries : list[CanonicalEntry]
        Canonical entries in hashed (sorted) order.
    imports : list[str]
        Sorted unique import paths. Informational only, not hashed.
    packages : list[str]
        Sorted distinct package names found in the directory.
    files : list[FileIngestionResult]
        Per-file ingestion results.
    package_path : str
        Directory that was hashed, or empty for in-memory sources.
    """

    fingerprint: str
    entries: list[CanonicalEntry]
    imports: list[str] = field(default_factory=list)
    packages: list[str] = field(default_factory=list)
    files: list[FileIngestionResult] = field(default_factory=list)
    package_path: str = ""

    @property
    def descriptors(self) -> list[str]:
        """Entry texts in hashed order."""
        return [e.text for e in self.entries]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        data = asdict(self)
        data["entries"] = [{"kind": e.kind.value, "text": e.text} for e in self.entries]
        return data
