"""
Parsing of sequence files into Data.raw_seq.
"""

from typing import List
from loguru import logger

import pandas as pd
from Bio import SeqIO

from .data import Data, DataType, SeqEntry
from .errors import UnsupportedFormat
from .session import Session


def _parse_seqio(path: str, fmt: str) -> List[SeqEntry]:
    return [
        SeqEntry(record.id, str(record.seq).upper())
        for record in SeqIO.parse(path, fmt)
        if len(record.seq)
    ]


def _parse_csv(path: str) -> List[SeqEntry]:
    """
    Read a CSV with a ``sequence`` column and an optional ``id`` column.

    Column names are matched case-insensitively. Rows without an id column
    are numbered from 1.
    """
    df = pd.read_csv(path, dtype=str)
    columns = {col.strip().lower(): col for col in df.columns}

    if "sequence" not in columns:
        raise UnsupportedFormat(f"CSV file '{path}' has no 'sequence' column")

    sequences = df[columns["sequence"]].fillna("").str.strip().str.upper()
    if "id" in columns:
        ids = df[columns["id"]].fillna("").astype(str)
    else:
        ids = pd.Series([str(i) for i in range(1, len(df) + 1)], index=df.index)

    return [SeqEntry(seq_id, seq) for seq_id, seq in zip(ids, sequences) if seq]


def parse_raw_seq(data: Data, force: bool = False) -> List[SeqEntry]:
    """
    Populate ``data.raw_seq`` from its file.

    Args:
        data: Data record to parse
        force: Parse again even if sequences were already loaded

    Returns:
        The parsed sequences
    """
    if data.is_parsed and not force:
        return data.raw_seq

    logger.info(f"Parsing {data.datatype.value} file: {data.path}")

    match data.datatype:
        case DataType.FASTA:
            entries = _parse_seqio(data.path, "fasta")
        case DataType.FASTQ:
            entries = _parse_seqio(data.path, "fastq")
        case DataType.CSV:
            entries = _parse_csv(data.path)
        case _:
            raise UnsupportedFormat(f"No parser for file type '{data.datatype}'")

    if not entries:
        logger.warning(f"No sequences found in {data.path}")

    # derived state belongs to the previous sequences
    data.reset()
    data.raw_seq = entries
    logger.debug(f"Parsed {len(entries)} sequences from {data.path}")
    return entries


def load_session(session: Session, force: bool = False) -> Session:
    """Parse every Data record of a session."""
    for record in session.records():
        parse_raw_seq(record, force=force)
    return session
