"""
Writer for the PMA text database files.

Lines are encoded in the legacy Windows-1252 code page. Characters outside
the code page are written as HTML decimal character references
(``&#8364;``-style), so a run never aborts on exotic names.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Iterable, Optional, Tuple, Union

from ..models.kind import FeatureKind
from .formatter import format_line

logger = logging.getLogger(__name__)

LEGACY_ENCODING = 'cp1252'


@dataclass(frozen=True)
class WriterPolicy:
    """
    How the writer reacts to failures.

    Attributes:
        fallback_to_working_directory: When the destination file cannot be
            created, create the bare file name in the working directory instead
        continue_on_line_error: Log and count a failed line write, then go on
            with the next line
        encoding: Target code page
        errors: Codec error handler used for characters outside the code page
    """

    fallback_to_working_directory: bool = True
    continue_on_line_error: bool = True
    encoding: str = LEGACY_ENCODING
    errors: str = 'xmlcharrefreplace'

    @classmethod
    def strict(cls) -> 'WriterPolicy':
        """Policy that lets any creation or write failure propagate."""
        return cls(fallback_to_working_directory=False, continue_on_line_error=False)


@dataclass
class WriteReport:
    """Outcome of writing one kind."""

    kind: FeatureKind
    path: Path
    written: int = 0
    skipped: int = 0
    failed: int = 0
    lossy: int = 0

    @property
    def complete(self) -> bool:
        return self.failed == 0

    def __str__(self) -> str:
        return (f"{self.kind.token}: {self.written} lines written to {self.path} "
                f"(skipped={self.skipped} failed={self.failed} lossy={self.lossy})")


def transcode(line: str, encoding: str = LEGACY_ENCODING, errors: str = 'xmlcharrefreplace') -> Tuple[bytes, bool]:
    """
    Encode one line in the legacy code page.

    Args:
        line: Text to encode
        encoding: Target code page
        errors: Codec error handler for unmappable characters

    Returns:
        Tuple of (encoded bytes, True if some characters had to be substituted)
    """
    try:
        return line.encode(encoding), False
    except UnicodeEncodeError:
        return line.encode(encoding, errors=errors), True


def destination_path(output_directory: Optional[Union[str, Path]], kind: FeatureKind) -> Path:
    """
    Path of the output file for a kind.

    The file goes into output_directory when it is an existing directory,
    otherwise the bare file name is used (current working directory).
    """
    filename = Path(kind.filename)
    if output_directory is not None and Path(output_directory).is_dir():
        return Path(output_directory) / filename
    return filename


class TranscodingWriter:
    """Writes formatted records of one kind per file in the legacy encoding."""

    def __init__(self, output_directory: Optional[Union[str, Path]] = None, policy: Optional[WriterPolicy] = None):
        """
        Initialize the writer.

        Args:
            output_directory: Optional directory for the output files
            policy: Failure handling policy, lenient by default
        """
        self.output_directory = Path(output_directory) if output_directory is not None else None
        self.policy = policy or WriterPolicy()

    def _open(self, kind: FeatureKind) -> Tuple[BinaryIO, Path]:
        path = destination_path(self.output_directory, kind)
        try:
            return open(path, 'wb'), path
        except OSError as e:
            if not self.policy.fallback_to_working_directory:
                raise
            fallback = Path(kind.filename)
            logger.error(f"Cannot create {path}: {e}. Writing to {fallback} instead")
            return open(fallback, 'wb'), fallback

    def write(self, kind: FeatureKind, records: Iterable) -> WriteReport:
        """
        Create the file for a kind and write one line per record.

        Args:
            kind: Kind of the records, selects the file name
            records: Records in output order

        Returns:
            WriteReport with counts of written, skipped, failed and lossy lines

        Raises:
            OSError: If the file cannot be created (after the fallback, if enabled),
                or a line fails under a policy that does not continue on errors
        """
        handle, path = self._open(kind)
        report = WriteReport(kind=kind, path=path)
        with handle:
            for record in records:
                line = format_line(record)
                if line is None:
                    report.skipped += 1
                    continue
                data, lossy = transcode(line, self.policy.encoding, self.policy.errors)
                if lossy:
                    report.lossy += 1
                    logger.warning(f"{kind.token}: characters outside {self.policy.encoding} substituted in {line.rstrip()!r}")
                try:
                    handle.write(data)
                except OSError as e:
                    if not self.policy.continue_on_line_error:
                        raise
                    report.failed += 1
                    logger.error(f"{kind.token}: failed to write line to {path}: {e}")
                    continue
                report.written += 1
        logger.info(str(report))
        return report
