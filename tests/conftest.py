"""
Shared fixtures for highliner tests.
"""

import pytest

from highliner.core.session import registry

FASTA_CONTENT = """>seq1
ACGTACGTAC
>seq2
ACGTACGTAC
>seq3
ACGAACGTTC
>seq4
TCGTACGTAC
"""

FASTQ_CONTENT = """@read1
ACGTACGT
+
IIIIIIII
@read2
ACGTTCGT
+
IIIIIIII
"""

CSV_CONTENT = """id,sequence
a,MKVLA
b,MKVLA
c,MRVLA
"""


@pytest.fixture(autouse=True)
def clean_registry():
    """Every test starts and ends with an empty process-wide registry."""
    registry.clear()
    yield
    registry.clear()


@pytest.fixture
def fasta_file(tmp_path):
    path = tmp_path / "alignment.fasta"
    path.write_text(FASTA_CONTENT)
    return str(path)


@pytest.fixture
def fastq_file(tmp_path):
    path = tmp_path / "reads.fq"
    path.write_text(FASTQ_CONTENT)
    return str(path)


@pytest.fixture
def csv_file(tmp_path):
    path = tmp_path / "protein.csv"
    path.write_text(CSV_CONTENT)
    return str(path)


@pytest.fixture
def sequence_dir(tmp_path):
    """Directory with three importable files and one unsupported file."""
    directory = tmp_path / "alignments"
    directory.mkdir()
    (directory / "a.fasta").write_text(FASTA_CONTENT)
    (directory / "b.fastq").write_text(FASTQ_CONTENT)
    (directory / "c.csv").write_text(CSV_CONTENT)
    (directory / "notes.txt").write_text("not a sequence file\n")
    (directory / "nested").mkdir()
    return str(directory)
