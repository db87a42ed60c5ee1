"""
Variant compression, sampling, master selection and difference matrices.
"""

from typing import Dict, Optional
from loguru import logger

import numpy as np
import pandas as pd

from .data import Data, Variant
from .errors import InvalidArgument
from .parser import parse_raw_seq


class VariantAnalyzer:
    """
    Derives the state a Highlighter plot needs from a parsed Data record:
    the compressed variants, a random sample of them, the master sequence
    and the per-position difference matrix.
    """

    def __init__(self, config: Optional[Dict] = None):
        """
        Initialize the analyzer.

        Args:
            config: Optional configuration dictionary
        """
        self.config = config or {}
        analysis = self.config.get("analysis", {})
        self.sample_size = analysis.get("sample_size", 100)
        self.seed = analysis.get("seed")
        self.master_strategy = analysis.get("master_strategy", "most_abundant")

    def compress(self, data: Data) -> Dict[str, Variant]:
        """Collapse identical sequences into variants, in order of first occurrence."""
        if not data.is_parsed:
            parse_raw_seq(data)

        counts: Dict[str, int] = {}
        ids: Dict[str, list] = {}
        for entry in data.raw_seq:
            counts[entry.sequence] = counts.get(entry.sequence, 0) + 1
            ids.setdefault(entry.sequence, []).append(entry.id)

        data.compressed = {
            seq: Variant(seq, counts[seq], tuple(ids[seq])) for seq in counts
        }
        data.sample = {}
        data.seq_diff = None
        logger.info(f"Compressed {len(data.raw_seq)} sequences into {len(data.compressed)} variants")
        return data.compressed

    def select_master(self, data: Data, master: Optional[str] = None) -> str:
        """
        Set the master sequence of a record.

        Args:
            data: Compressed Data record
            master: Sequence id or literal sequence. Default uses the
                configured strategy, "most_abundant" or "first".

        Returns:
            The master sequence
        """
        if not data.compressed:
            self.compress(data)
        if not data.compressed:
            raise InvalidArgument(f"No sequences in {data.path} to select a master from")

        if master is not None:
            by_id = {entry.id: entry.sequence for entry in data.raw_seq}
            if master in by_id:
                sequence = by_id[master]
            elif master.upper() in data.compressed:
                sequence = master.upper()
            else:
                raise InvalidArgument(f"Master '{master}' is neither a sequence id nor a variant of {data.path}")
        elif self.master_strategy == "first":
            sequence = next(iter(data.compressed))
        elif self.master_strategy == "most_abundant":
            # ties resolve to the earliest variant
            sequence = max(data.compressed.values(), key=lambda v: v.count).sequence
        else:
            raise InvalidArgument(f"Unknown master strategy '{self.master_strategy}'")

        data.master = sequence
        data.seq_diff = None
        return sequence

    def sample_variants(self, data: Data, size: Optional[int] = None, seed: Optional[int] = None) -> Dict[str, Variant]:
        """
        Draw a random subset of the variants without replacement.

        The master variant, when set, is always part of the sample.
        """
        if not data.compressed:
            self.compress(data)

        size = self.sample_size if size is None else size
        seed = self.seed if seed is None else seed
        if size < 1:
            raise InvalidArgument(f"Sample size must be positive, got {size}")

        variants = list(data.compressed)
        if len(variants) <= size:
            chosen = variants
        else:
            rng = np.random.default_rng(seed)
            pool = [v for v in variants if v != data.master]
            n = size - 1 if data.master in data.compressed else size
            picked = set(rng.choice(len(pool), size=n, replace=False).tolist())
            keep = {pool[i] for i in picked}
            if data.master in data.compressed:
                keep.add(data.master)
            chosen = [v for v in variants if v in keep]

        data.sample = {seq: data.compressed[seq] for seq in chosen}
        data.seq_diff = None
        logger.debug(f"Sampled {len(data.sample)} of {len(data.compressed)} variants from {data.path}")
        return data.sample

    def compute_seq_diff(self, data: Data, use_sample: bool = True) -> pd.DataFrame:
        """
        Build the difference matrix of the variants against the master.

        Rows are variant sequences, columns are 1-based alignment positions.
        A cell holds the variant's residue where it differs from the master
        and None where it matches.
        """
        variants = data.sample if use_sample and data.sample else data.compressed
        if not data.master or not variants:
            raise InvalidArgument(
                f"Master and variants of {data.path} must be set before computing differences"
            )

        master = data.master
        rows = []
        for seq in variants:
            if len(seq) != len(master):
                raise InvalidArgument(
                    f"Variant of length {len(seq)} does not match master of length {len(master)} in {data.path}"
                )
            rows.append([res if res != ref else None for res, ref in zip(seq, master)])

        data.seq_diff = pd.DataFrame(
            rows,
            index=list(variants),
            columns=range(1, len(master) + 1),
            dtype=object,
        )
        return data.seq_diff

    def prepare(self, data: Data, master: Optional[str] = None) -> pd.DataFrame:
        """Run compression, master selection, sampling and difference computation."""
        self.compress(data)
        self.select_master(data, master)
        self.sample_variants(data)
        return self.compute_seq_diff(data)
