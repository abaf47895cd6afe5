"""Fingerprint pipeline runner.

Chains the pipeline stages for one package directory:

    Stage 1: Parse       - every non-test Go file of the directory
    Stage 2: Extract     - export filtering and classification, per file
    Stage 3: Hash        - byte-wise sort, concatenation and SHA-512/256

Any error aborts the run; there is no partial fingerprint.
"""

import time
from collections.abc import Sequence
from pathlib import Path

from goexphash.audit.logger import AuditLogger
from goexphash.engine.config import HashConfig, HashResult
from goexphash.errors import GoExpHashError, ParseError, ResolutionError
from goexphash.extract import Classification, classify, collect_declarations, filter_exports
from goexphash.fingerprint import hash_entries, sort_entries
from goexphash.models import CanonicalEntry
from goexphash.parse import FileIngestionResult, ParsedFile, ingest_folder

__all__ = ["hash_directory", "hash_parsed_files"]


# ---------------------------------------------------------------------------
# Individual stage functions
# ---------------------------------------------------------------------------


def _stage1_parse(
    package_path: Path,
    logger: AuditLogger | None,
) -> tuple[list[ParsedFile], list[FileIngestionResult]]:
    """Stage 1: Parse the package directory."""
    if logger:
        logger.stage_started("stage1_parse")
    started = time.perf_counter()

    parsed_files, report = ingest_folder(package_path)

    if logger:
        for result in report.file_results:
            logger.file_parsed(
                result.filename,
                result.package,
                result.declarations,
                size_bytes=result.file_size,
                digest=result.file_digest,
            )
        logger.stage_finished(
            "stage1_parse",
            duration_seconds=time.perf_counter() - started,
            counters={"files": report.total_files, "packages": len(report.packages)},
        )

    return parsed_files, list(report.file_results)


def _stage2_extract(
    parsed_files: Sequence[ParsedFile],
    logger: AuditLogger | None,
) -> Classification:
    """Stage 2: Filter exports and classify declarations of every file."""
    if logger:
        logger.stage_started("stage2_extract")
    started = time.perf_counter()

    combined = Classification()
    for parsed in parsed_files:
        exported = filter_exports(collect_declarations(parsed))
        combined.extend(classify(exported))

    if logger:
        logger.stage_finished(
            "stage2_extract",
            duration_seconds=time.perf_counter() - started,
            counters={"entries": len(combined.entries), "imports": len(combined.imports)},
        )

    return combined


def _stage3_hash(
    classification: Classification,
    config: HashConfig,
    logger: AuditLogger | None,
) -> tuple[str, list[CanonicalEntry]]:
    """Stage 3: Sort entries and compute the fingerprint."""
    if logger:
        logger.stage_started("stage3_hash")
    started = time.perf_counter()

    entries = sort_entries(classification.entries)
    if logger and config.print_descriptors:
        for entry in entries:
            logger.descriptor(entry.text, entry.kind.value)

    digest = hash_entries(entries)

    if logger:
        logger.stage_finished(
            "stage3_hash",
            duration_seconds=time.perf_counter() - started,
            counters={"entries": len(entries)},
        )

    return digest, entries


# ---------------------------------------------------------------------------
# Pipeline runner
# ---------------------------------------------------------------------------


def hash_parsed_files(
    parsed_files: Sequence[ParsedFile],
    config: HashConfig | None = None,
    logger: AuditLogger | None = None,
    files: Sequence[FileIngestionResult] = (),
    package_path: str = "",
) -> HashResult:
    """Run stages 2 and 3 over already-parsed files.

    Parameters
    ----------
    parsed_files : Sequence[ParsedFile]
        Parsed files, in any order.
    config : HashConfig | None, optional
        Run configuration, defaults to ``HashConfig()``.
    logger : AuditLogger | None, optional
        Audit logger for structured events.
    files : Sequence[FileIngestionResult], optional
        Ingestion results to attach to the result.
    package_path : str, optional
        Directory to attach to the result.

    Returns
    -------
    HashResult
        Fingerprint and supporting data.
    """
    config = config or HashConfig()

    classification = _stage2_extract(parsed_files, logger)
    digest, entries = _stage3_hash(classification, config, logger)

    return HashResult(
        fingerprint=digest,
        entries=entries,
        imports=sorted(classification.imports),
        packages=sorted({p.package for p in parsed_files}),
        files=list(files),
        package_path=package_path,
    )


def hash_directory(
    package_path: Path,
    config: HashConfig | None = None,
    logger: AuditLogger | None = None,
) -> HashResult:
    """Compute the exported-API fingerprint of a package directory.

    Every package found in the directory contributes to the same entry set;
    a directory holding ``package foo`` and ``package foo_test`` files (or
    any two package names) yields one combined fingerprint.

    Parameters
    ----------
    package_path : Path
        Package directory.
    config : HashConfig | None, optional
        Run configuration, defaults to ``HashConfig()``.
    logger : AuditLogger | None, optional
        Audit logger for structured events.

    Returns
    -------
    HashResult
        Fingerprint and supporting data.

    Raises
    ------
    ResolutionError
        If the path is not an existing directory.
    ParseError
        If any file fails to parse. A directory without non-test Go files
        hashes the empty entry set.
    """
    config = config or HashConfig()
    package_path = Path(package_path)
    started = time.perf_counter()

    if logger:
        logger.run_started(str(package_path), config.to_dict())

    try:
        if not package_path.is_dir():
            raise ResolutionError(f"Package path is not a directory: {package_path}")

        parsed_files, file_results = _stage1_parse(package_path, logger)
        result = hash_parsed_files(
            parsed_files,
            config,
            logger,
            files=file_results,
            package_path=str(package_path),
        )
    except GoExpHashError as e:
        if logger:
            logger.error(
                type(e).__name__,
                str(e),
                file=e.file if isinstance(e, ParseError) else None,
            )
            logger.run_finished("failed", time.perf_counter() - started)
        raise

    if logger:
        logger.run_finished("success", time.perf_counter() - started, result.fingerprint)

    return result
