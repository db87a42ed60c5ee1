"""
highliner - import sequence alignments into sessions and prepare
Highlighter plots of their differences to a master sequence.
"""

__version__ = "0.1.0"
__author__ = "highliner Team"

from .core.data import Data, DataType, SeqType
from .core.session import DEFAULT_SESSION, Session, init_session, get_session, close_session, remove_data
from .core.importer import import_file, import_raw_seq
from .core.compressor import VariantAnalyzer
from .core.plotter import HighlighterPlotter
from .config import load_config, setup_logging

__all__ = [
    "Data",
    "DataType",
    "SeqType",
    "DEFAULT_SESSION",
    "Session",
    "init_session",
    "get_session",
    "close_session",
    "remove_data",
    "import_file",
    "import_raw_seq",
    "VariantAnalyzer",
    "HighlighterPlotter",
    "load_config",
    "setup_logging",
]
