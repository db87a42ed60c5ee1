"""
Sessions holding imported Data records.
"""

from collections.abc import MutableMapping
from typing import Dict, Iterator, List, Optional, Union
from loguru import logger

from .data import Data
from .errors import InvalidArgument, RecordNotFoundError, SessionNotFoundError

DEFAULT_SESSION = "highliner.session"


class Session(MutableMapping):
    """
    Named container mapping file paths to Data records.

    Records do not know which session they belong to, the session owns them.
    """

    def __init__(self, name: str):
        self.name = name
        self._records: Dict[str, Data] = {}

    def __getitem__(self, path: str) -> Data:
        try:
            return self._records[path]
        except KeyError:
            raise RecordNotFoundError(
                f"No Data object for '{path}' in session '{self.name}'"
            ) from None

    def __setitem__(self, path: str, record: Data) -> None:
        if not isinstance(record, Data):
            raise InvalidArgument(f"Sessions can only hold Data objects, got {type(record).__name__}")
        if path != record.path:
            raise InvalidArgument(f"Key '{path}' does not match the record path '{record.path}'")
        self._records[path] = record

    def __delitem__(self, path: str) -> None:
        if path not in self._records:
            raise RecordNotFoundError(
                f"No Data object for '{path}' in session '{self.name}'"
            )
        del self._records[path]

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, path) -> bool:
        return path in self._records

    def add(self, record: Data, force: bool = False) -> bool:
        """
        Store a record under its path.

        Returns:
            False if the path was already present and ``force`` is not set
        """
        if record.path in self._records and not force:
            return False
        self[record.path] = record
        return True

    def discard(self, path: str) -> None:
        self._records.pop(path, None)

    def paths(self) -> List[str]:
        return list(self._records)

    def records(self) -> List[Data]:
        return list(self._records.values())

    def __repr__(self):
        return f"Session(name={self.name!r}, records={len(self)})"


class SessionRegistry:
    """Table of sessions addressable by name."""

    def __init__(self):
        self._sessions: Dict[str, Session] = {}

    def init(self, name: str = DEFAULT_SESSION) -> Session:
        """Create a new empty session, replacing any session of the same name."""
        if not isinstance(name, str):
            raise InvalidArgument(f"Session name must be a string, got {type(name).__name__}")
        if name in self._sessions:
            logger.debug(f"Replacing existing session '{name}'")
        session = Session(name)
        self._sessions[name] = session
        logger.info(f"Initialized session '{name}'")
        return session

    def register(self, session: Session) -> Session:
        """Add an existing session object under its own name."""
        self._sessions[session.name] = session
        return session

    def get(self, name: str) -> Session:
        try:
            return self._sessions[name]
        except (KeyError, TypeError):
            raise SessionNotFoundError(f"Session '{name}' not found") from None

    def close(self, name: str = DEFAULT_SESSION) -> None:
        try:
            del self._sessions[name]
        except (KeyError, TypeError):
            raise SessionNotFoundError(f"Session '{name}' not found") from None
        logger.info(f"Closed session '{name}'")

    def exists(self, name: str) -> bool:
        try:
            return name in self._sessions
        except TypeError:
            return False

    def names(self) -> List[str]:
        return list(self._sessions)

    def clear(self) -> None:
        self._sessions.clear()

    def __contains__(self, name) -> bool:
        return self.exists(name)

    def __len__(self) -> int:
        return len(self._sessions)


# Process-wide registry used when no registry is passed explicitly
registry = SessionRegistry()


def _registry(reg: Optional[SessionRegistry]) -> SessionRegistry:
    return registry if reg is None else reg


def init_session(name: str = DEFAULT_SESSION, registry: Optional[SessionRegistry] = None) -> Session:
    """
    Create a session.

    Args:
        name: Name of the session to create. An existing session of the same
            name is replaced.
        registry: Registry to create the session in. Default is the
            process-wide registry.

    Returns:
        The new, empty session
    """
    return _registry(registry).init(name)


def get_session(name: Union[str, Session] = DEFAULT_SESSION, registry: Optional[SessionRegistry] = None) -> Session:
    """Return the session registered under ``name``, raising SessionNotFoundError otherwise."""
    if isinstance(name, Session):
        name = name.name
    return _registry(registry).get(name)


def close_session(name: Union[str, Session] = DEFAULT_SESSION, registry: Optional[SessionRegistry] = None) -> None:
    """
    Remove a session and every Data record it holds.

    Raises:
        SessionNotFoundError: If no session of that name exists
    """
    if isinstance(name, Session):
        name = name.name
    _registry(registry).close(name)


def remove_data(
    data: Union[str, Data],
    session: Union[str, Session] = DEFAULT_SESSION,
    registry: Optional[SessionRegistry] = None,
) -> None:
    """
    Remove a Data record from a session.

    Args:
        data: Data record or the path it was imported from
        session: Session, or name of the session, holding the record
        registry: Registry the session name is resolved in

    Raises:
        SessionNotFoundError: If the session does not exist
        RecordNotFoundError: If the record is not in the session
        InvalidArgument: If ``data`` is neither a path nor a Data record
    """
    if not isinstance(session, Session):
        session = get_session(session, registry=registry)

    if isinstance(data, str):
        path = data
    elif isinstance(data, Data):
        path = data.path
    else:
        raise InvalidArgument(f"Expected a Data object or path, got {type(data).__name__}")

    del session[path]
    logger.debug(f"Removed '{path}' from session '{session.name}'")
