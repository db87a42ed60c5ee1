"""
Import of sequence files into sessions.
"""

import os
import warnings
from enum import Enum
from pathlib import Path
from collections.abc import Iterable
from typing import List, Optional, Union
from loguru import logger

from .data import Data, DataType, SeqType
from .errors import HighlineRError, DuplicateImportWarning, ImportFailedWarning, InvalidArgument
from .session import DEFAULT_SESSION, Session, SessionRegistry, _registry

PathLike = Union[str, os.PathLike]


class ImportStatus(str, Enum):
    IMPORTED = "imported"
    SKIPPED_DUPLICATE = "skipped_duplicate"
    FAILED = "failed"


def _resolve_session(
    session: Union[str, Session],
    registry: Optional[SessionRegistry],
) -> Session:
    """Return the named session, creating it if it does not exist yet."""
    reg = _registry(registry)
    if isinstance(session, Session):
        if not reg.exists(session.name):
            return reg.register(session)
        if reg.get(session.name) is not session:
            raise InvalidArgument(
                f"Another session named '{session.name}' is already registered"
            )
        return session
    if not isinstance(session, str):
        raise InvalidArgument(f"Session must be a name or Session object, got {type(session).__name__}")
    if not reg.exists(session):
        return reg.init(session)
    return reg.get(session)


def _check_override(name: str, value, enum_type) -> None:
    if value is not None and not isinstance(value, (str, enum_type)):
        raise InvalidArgument(f"{name} must be a string, got {type(value).__name__}")


def import_file(
    path: PathLike,
    datatype: Optional[Union[str, DataType]] = None,
    seqtype: Optional[Union[str, SeqType]] = None,
    session: Union[str, Session] = DEFAULT_SESSION,
    force: bool = False,
    registry: Optional[SessionRegistry] = None,
) -> ImportStatus:
    """
    Create a Data record for one sequence file inside a session.

    Args:
        path: Path to the sequence file
        datatype: File type. Default is inferred from the file extension
        seqtype: "nucleotide" (default) or "amino_acid"
        session: Session, or name of the session, to import into. Created
            if it does not exist.
        force: Re-import a file that is already in the session
        registry: Registry session names are resolved in

    Returns:
        IMPORTED, or SKIPPED_DUPLICATE if the file was already imported

    Raises:
        InvalidArgument: For malformed arguments or a path that does not exist
        UnsupportedFormat: If the file type is not supported
    """
    if not isinstance(path, (str, os.PathLike)):
        raise InvalidArgument(f"Path must be a string, got {type(path).__name__}")
    if not os.path.exists(path):
        raise InvalidArgument(f"Path '{path}' does not exist")
    if not isinstance(force, bool):
        raise InvalidArgument(f"force must be a boolean, got {type(force).__name__}")
    _check_override("datatype", datatype, DataType)
    _check_override("seqtype", seqtype, SeqType)

    path = os.fspath(path)
    target = _resolve_session(session, registry)

    if path in target and not force:
        message = f"File {path} ignored. Already imported in {target.name} session."
        logger.warning(message)
        warnings.warn(message, DuplicateImportWarning, stacklevel=2)
        return ImportStatus.SKIPPED_DUPLICATE

    record = Data.from_path(
        path,
        datatype=datatype,
        seqtype=SeqType.NUCLEOTIDE if seqtype is None else seqtype,
    )
    target.add(record, force=True)
    logger.debug(f"Imported {path} as {record.datatype.value}/{record.seqtype.value} into '{target.name}'")
    return ImportStatus.IMPORTED


def _list_directory(directory: str) -> List[str]:
    """Regular files directly inside ``directory``, sorted by name."""
    directory = directory.rstrip("/\\") or directory
    return sorted(
        str(entry) for entry in Path(directory).iterdir() if entry.is_file()
    )


def _import_isolated(path, datatype, seqtype, session, force, registry) -> ImportStatus:
    """Import one member of a batch, reporting its errors as warnings."""
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        try:
            status = import_file(
                path,
                datatype=datatype,
                seqtype=seqtype,
                session=session,
                force=force,
                registry=registry,
            )
        except (HighlineRError, OSError) as e:
            logger.warning(f"Skipping {path}: {e}")
            status = ImportStatus.FAILED
            failure = e
        else:
            failure = None

    for w in caught:
        warnings.warn(w.message, w.category, stacklevel=3)
    if failure is not None:
        warnings.warn(f"File {path} not imported: {failure}", ImportFailedWarning, stacklevel=3)
    return status


def import_raw_seq(
    paths: Union[PathLike, Iterable[PathLike]],
    datatype: Optional[Union[str, DataType]] = None,
    seqtype: Optional[Union[str, SeqType]] = None,
    session: Union[str, Session] = DEFAULT_SESSION,
    force: bool = False,
    registry: Optional[SessionRegistry] = None,
) -> Session:
    """
    Import one file, every file in a directory, or a list of files.

    For directories and lists each file is imported on its own: a file that
    fails is reported as an ImportFailedWarning and the remaining files are
    still imported. ``datatype`` and ``seqtype`` apply to every file.

    Args:
        paths: Path to a file, path to a directory, or a collection of paths
        datatype: File type override for all files
        seqtype: Sequence type override for all files
        session: Session, or name of the session, to import into
        force: Re-import files that are already in the session
        registry: Registry session names are resolved in

    Returns:
        The session the files were imported into
    """
    if isinstance(paths, (str, os.PathLike)):
        single = os.fspath(paths)
        if not os.path.exists(single):
            raise InvalidArgument(f"Path '{single}' not valid")
        if not os.path.isdir(single):
            import_file(
                single,
                datatype=datatype,
                seqtype=seqtype,
                session=session,
                force=force,
                registry=registry,
            )
            return _resolve_session(session, registry)
        batch = _list_directory(single)
        logger.info(f"Importing {len(batch)} files from directory {single}")
    elif isinstance(paths, (bytes, bytearray)):
        raise InvalidArgument("Paths must be strings, got bytes")
    elif isinstance(paths, Iterable):
        batch = list(paths)
    else:
        raise InvalidArgument(f"Expected a path or a collection of paths, got {type(paths).__name__}")

    target = _resolve_session(session, registry)

    counts = {status: 0 for status in ImportStatus}
    for path in batch:
        status = _import_isolated(path, datatype, seqtype, target, force, registry)
        counts[status] += 1

    logger.info(
        f"Session '{target.name}': {counts[ImportStatus.IMPORTED]} imported, "
        f"{counts[ImportStatus.SKIPPED_DUPLICATE]} skipped, "
        f"{counts[ImportStatus.FAILED]} failed"
    )
    return target


import_one = import_file
import_many = import_raw_seq
