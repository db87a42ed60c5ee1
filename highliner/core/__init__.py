"""
Core modules for importing and preparing sequence alignments.
"""

from .data import Data, DataType, SeqType, SeqEntry, Variant, create_data
from .session import (
    DEFAULT_SESSION,
    Session,
    SessionRegistry,
    registry,
    init_session,
    get_session,
    close_session,
    remove_data,
)
from .importer import ImportStatus, import_file, import_raw_seq, import_one, import_many
from .parser import parse_raw_seq, load_session
from .compressor import VariantAnalyzer
from .plotter import HighlighterPlotter

__all__ = [
    "Data",
    "DataType",
    "SeqType",
    "SeqEntry",
    "Variant",
    "create_data",
    "DEFAULT_SESSION",
    "Session",
    "SessionRegistry",
    "registry",
    "init_session",
    "get_session",
    "close_session",
    "remove_data",
    "ImportStatus",
    "import_file",
    "import_raw_seq",
    "import_one",
    "import_many",
    "parse_raw_seq",
    "load_session",
    "VariantAnalyzer",
    "HighlighterPlotter",
]
