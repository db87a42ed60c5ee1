"""
Data record representing one imported sequence file.

A Data object only carries the path, the file and sequence type and the
state derived from the file by the later stages (parsed sequences,
compressed variants, sample, master sequence and difference matrix).
Constructing one validates the inputs but never opens the file.
"""

import os
from enum import Enum
from pathlib import Path
from typing import Dict, List, NamedTuple, Optional, Union

import pandas as pd

from .errors import DataFileNotFoundError, InvalidArgument, UnsupportedFormat


class DataType(str, Enum):
    FASTA = "fasta"
    FASTQ = "fastq"
    CSV = "csv"


class SeqType(str, Enum):
    NUCLEOTIDE = "nucleotide"
    AMINO_ACID = "amino_acid"


# Extension (lower case) -> file type
DATATYPE_ALIASES: Dict[str, DataType] = {
    "fa": DataType.FASTA,
    "fas": DataType.FASTA,
    "fasta": DataType.FASTA,
    "fq": DataType.FASTQ,
    "fastq": DataType.FASTQ,
    "csv": DataType.CSV,
}

SEQTYPE_ALIASES: Dict[str, SeqType] = {
    "nucleotide": SeqType.NUCLEOTIDE,
    "amino_acid": SeqType.AMINO_ACID,
    "amino acid": SeqType.AMINO_ACID,
}


class SeqEntry(NamedTuple):
    """One parsed sequence: identifier and residue string."""
    id: str
    sequence: str


class Variant(NamedTuple):
    """A unique sequence with its abundance and the ids carrying it."""
    sequence: str
    count: int
    ids: tuple


def infer_datatype(path: Union[str, os.PathLike]) -> str:
    """Return the last period separated token of the file name."""
    return Path(path).name.split(".")[-1]


def normalize_datatype(datatype: Union[str, DataType], path: Union[str, os.PathLike] = "") -> DataType:
    """
    Map a file type or extension onto a DataType.

    Args:
        datatype: Extension or file type name, case-insensitive
        path: File the type belongs to, only used in the error message

    Returns:
        The matching DataType

    Raises:
        UnsupportedFormat: If the type is not fasta, fastq or csv
    """
    if isinstance(datatype, DataType):
        return datatype
    if isinstance(datatype, str) and datatype.lower() in DATATYPE_ALIASES:
        return DATATYPE_ALIASES[datatype.lower()]
    raise UnsupportedFormat(
        f"File '{path}' not imported. highliner does not know how to handle files of type "
        f"'{datatype}' and can only be used on fasta, fastq and csv files"
    )


def normalize_seqtype(seqtype: Union[str, SeqType]) -> SeqType:
    """Map a sequence type name onto a SeqType, raising InvalidArgument otherwise."""
    if isinstance(seqtype, SeqType):
        return seqtype
    if isinstance(seqtype, str) and seqtype.lower() in SEQTYPE_ALIASES:
        return SEQTYPE_ALIASES[seqtype.lower()]
    raise InvalidArgument(
        f"Invalid seqtype '{seqtype}'. Options: 'nucleotide' or 'amino_acid'"
    )


class Data:
    """
    Imported sequence file and the state derived from it.

    Attributes:
        path: Path of the sequence file, the record's key within a session
        datatype: File type of the sequence file
        seqtype: Type of the sequences in the file
        raw_seq: Parsed sequences, filled by the parser
        compressed: Unique sequence -> Variant
        sample: Randomly drawn subset of ``compressed``
        master: Reference sequence differences are computed against
        seq_diff: Variant x position matrix of differences to ``master``
    """

    def __init__(self, path: str, datatype: DataType, seqtype: SeqType = SeqType.NUCLEOTIDE):
        self.path = path
        self.datatype = DataType(datatype)
        self.seqtype = SeqType(seqtype)
        self.raw_seq: List[SeqEntry] = []
        self.compressed: Dict[str, Variant] = {}
        self.sample: Dict[str, Variant] = {}
        self.master: str = ""
        self.seq_diff: Optional[pd.DataFrame] = None

    @classmethod
    def from_path(
        cls,
        path: Union[str, os.PathLike],
        datatype: Optional[Union[str, DataType]] = None,
        seqtype: Union[str, SeqType] = SeqType.NUCLEOTIDE,
    ) -> "Data":
        """
        Validate the inputs and construct an empty Data record.

        Args:
            path: Path to the sequence file
            datatype: File type. Default is the file extension
            seqtype: "nucleotide" (default) or "amino_acid"

        Returns:
            Data record with no parsed or derived state

        Raises:
            DataFileNotFoundError: If the file does not exist
            UnsupportedFormat: If the file type is not supported
            InvalidArgument: If the sequence type is not supported
        """
        if not os.path.exists(path):
            raise DataFileNotFoundError(f"File '{path}' not found")

        if datatype is None:
            datatype = infer_datatype(path)

        return cls(
            str(path),
            normalize_datatype(datatype, path),
            normalize_seqtype(seqtype),
        )

    @property
    def is_parsed(self) -> bool:
        return bool(self.raw_seq)

    @property
    def has_diff(self) -> bool:
        return self.seq_diff is not None

    def reset(self) -> None:
        """Drop parsed sequences and all state derived from them."""
        self.raw_seq = []
        self.compressed = {}
        self.sample = {}
        self.master = ""
        self.seq_diff = None

    def __repr__(self):
        return (
            f"Data(path={self.path!r}, datatype={self.datatype.value!r}, "
            f"seqtype={self.seqtype.value!r}, sequences={len(self.raw_seq)})"
        )


create_data = Data.from_path
