"""
Highlighter plots of sequence differences against a master sequence.
"""

from pathlib import Path
from typing import Dict, Optional, Union
from loguru import logger

import matplotlib
matplotlib.use('Agg')  # Set backend to non-interactive to avoid Qt warnings
import matplotlib.pyplot as plt

from .compressor import VariantAnalyzer
from .data import Data, SeqType

NUCLEOTIDE_COLORS = {
    "A": "#2ca02c",
    "C": "#1f77b4",
    "G": "#ff7f0e",
    "T": "#d62728",
    "U": "#d62728",
    "-": "#7f7f7f",
}
AMINO_ACID_COLOR = "#9467bd"
OTHER_COLOR = "#000000"


class HighlighterPlotter:
    """
    Draws one row per variant with a tick at every position where the
    variant differs from the master.
    """

    def __init__(self, output_dir: Union[str, Path], config: Optional[Dict] = None):
        """
        Initialize the plotter.

        Args:
            output_dir: Directory plots are written to
            config: Optional configuration dictionary
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.config = config or {}
        plot_config = self.config.get("plot", {})
        self.dpi = plot_config.get("dpi", 300)
        self.figure_width = plot_config.get("figure_width", 10)
        self.analyzer = VariantAnalyzer(self.config)

    def _color(self, residue: str, seqtype: SeqType) -> str:
        if seqtype == SeqType.AMINO_ACID:
            return OTHER_COLOR if residue == "-" else AMINO_ACID_COLOR
        return NUCLEOTIDE_COLORS.get(residue, OTHER_COLOR)

    def plot(self, data: Data, filename: Optional[str] = None) -> Optional[str]:
        """
        Generate a Highlighter plot for a Data record.

        The difference matrix is computed first if the record has none.

        Args:
            data: Data record to plot
            filename: Output file name. Default is derived from the input file.

        Returns:
            Path to the generated plot file, or None if failed
        """
        try:
            if not data.has_diff:
                self.analyzer.prepare(data)

            diff = data.seq_diff
            n_rows, n_cols = diff.shape
            fig, ax = plt.subplots(figsize=(self.figure_width, max(2, 0.3 * n_rows + 1)))

            for row, seq in enumerate(diff.index):
                y = n_rows - row
                ax.hlines(y, 1, n_cols, color="lightgrey", linewidth=0.8)
                for pos, residue in diff.loc[seq].dropna().items():
                    ax.vlines(pos, y - 0.35, y + 0.35, color=self._color(residue, data.seqtype), linewidth=1.5)

            ax.set_yticks(range(1, n_rows + 1))
            labels = [f"{data.sample.get(s, data.compressed[s]).count}" for s in diff.index]
            ax.set_yticklabels(labels[::-1])
            ax.set_xlim(0, n_cols + 1)
            ax.set_xlabel("Alignment position")
            ax.set_ylabel("Variant (count)")
            ax.set_title(f"Highlighter plot: {Path(data.path).name}")

            output_file = self.output_dir / (filename or f"{Path(data.path).stem}_highlighter.png")
            fig.savefig(output_file, dpi=self.dpi, bbox_inches='tight')
            plt.close(fig)

            logger.info(f"Generated Highlighter plot: {output_file}")
            return str(output_file)

        except Exception as e:
            plt.close('all')
            logger.error(f"Failed to generate Highlighter plot for {data.path}: {e}")
            return None
