"""
Tests for the import pipeline.
"""

import os
import warnings

import pytest

from highliner.core.data import DataType, SeqType
from highliner.core.errors import (
    DuplicateImportWarning,
    ImportFailedWarning,
    InvalidArgument,
    UnsupportedFormat,
)
from highliner.core.importer import ImportStatus, import_file, import_many, import_raw_seq
from highliner.core.session import Session, SessionRegistry, get_session, init_session, registry


def test_import_file_creates_session(fasta_file):
    status = import_file(fasta_file, session="s1")

    assert status == ImportStatus.IMPORTED
    session = get_session("s1")
    assert session.paths() == [fasta_file]
    assert session[fasta_file].datatype == DataType.FASTA
    assert session[fasta_file].seqtype == SeqType.NUCLEOTIDE


def test_import_file_into_existing_session(fasta_file):
    session = init_session("s1")

    import_file(fasta_file, session="s1")

    assert fasta_file in session


def test_import_file_rejects_non_string_path():
    with pytest.raises(InvalidArgument):
        import_file(123, session="s1")


def test_import_file_rejects_missing_path(tmp_path):
    with pytest.raises(InvalidArgument):
        import_file(str(tmp_path / "missing.fasta"), session="s1")


def test_import_file_rejects_non_bool_force(fasta_file):
    with pytest.raises(InvalidArgument):
        import_file(fasta_file, session="s1", force="yes")


def test_import_file_rejects_bad_session_type(fasta_file):
    with pytest.raises(InvalidArgument):
        import_file(fasta_file, session=1)


def test_import_file_unsupported_format(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("")

    with pytest.raises(UnsupportedFormat):
        import_file(str(path), session="s1")


def test_duplicate_import_warns_and_keeps_one(fasta_file):
    import_file(fasta_file, session="s1")
    original = get_session("s1")[fasta_file]

    with pytest.warns(DuplicateImportWarning):
        status = import_file(fasta_file, session="s1")

    session = get_session("s1")
    assert status == ImportStatus.SKIPPED_DUPLICATE
    assert len(session) == 1
    assert session[fasta_file] is original


def test_forced_import_replaces_record(fasta_file):
    import_file(fasta_file, session="s1")
    original = get_session("s1")[fasta_file]

    with warnings.catch_warnings():
        warnings.simplefilter("error")
        import_file(fasta_file, session="s1", force=True, seqtype="amino_acid")

    replaced = get_session("s1")[fasta_file]
    assert replaced is not original
    assert replaced.seqtype == SeqType.AMINO_ACID
    assert len(get_session("s1")) == 1


def test_import_raw_seq_list_example(fasta_file, fastq_file):
    session = import_many([fasta_file, fastq_file], session="s1")

    assert session is get_session("s1")
    assert session.paths() == [fasta_file, fastq_file]
    assert session[fasta_file].datatype == DataType.FASTA
    assert session[fastq_file].datatype == DataType.FASTQ
    assert all(r.seqtype == SeqType.NUCLEOTIDE for r in session.records())


def test_import_raw_seq_single_file(fasta_file):
    session = import_raw_seq(fasta_file, session="s1")

    assert isinstance(session, Session)
    assert session.paths() == [fasta_file]


def test_import_raw_seq_single_file_errors_propagate(tmp_path):
    path = tmp_path / "reads.bam"
    path.write_text("")

    with pytest.raises(UnsupportedFormat):
        import_raw_seq(str(path), session="s1")


def test_import_raw_seq_missing_path(tmp_path):
    with pytest.raises(InvalidArgument):
        import_raw_seq(str(tmp_path / "missing"), session="s1")


def test_import_raw_seq_rejects_non_path():
    with pytest.raises(InvalidArgument):
        import_raw_seq(3.5, session="s1")


def test_import_directory_isolates_failures(sequence_dir):
    with pytest.warns(ImportFailedWarning) as record:
        session = import_raw_seq(sequence_dir, session="s1")

    expected = sorted(
        os.path.join(sequence_dir, name) for name in ("a.fasta", "b.fastq", "c.csv")
    )
    assert sorted(session.paths()) == expected
    failures = [w for w in record if issubclass(w.category, ImportFailedWarning)]
    assert len(failures) == 1
    assert "notes.txt" in str(failures[0].message)


def test_import_directory_strips_trailing_separator(sequence_dir):
    with pytest.warns(ImportFailedWarning):
        session = import_raw_seq(sequence_dir + os.sep, session="s1")

    assert os.path.join(sequence_dir, "a.fasta") in session
    assert len(session) == 3


def test_batch_continues_after_missing_member(fasta_file, fastq_file, tmp_path):
    missing = str(tmp_path / "missing.fasta")

    with pytest.warns(ImportFailedWarning):
        session = import_raw_seq([fasta_file, missing, fastq_file], session="s1")

    assert session.paths() == [fasta_file, fastq_file]


def test_batch_reports_duplicates(fasta_file, fastq_file):
    import_raw_seq([fasta_file, fastq_file], session="s1")

    with pytest.warns(DuplicateImportWarning) as record:
        session = import_raw_seq([fasta_file, fastq_file], session="s1")

    assert len(session) == 2
    duplicates = [w for w in record if issubclass(w.category, DuplicateImportWarning)]
    assert len(duplicates) == 2


def test_batch_force_replaces_records(fasta_file, fastq_file):
    session = import_raw_seq([fasta_file, fastq_file], session="s1")
    before = session[fasta_file]

    import_raw_seq([fasta_file, fastq_file], session="s1", force=True)

    assert session[fasta_file] is not before
    assert len(session) == 2


def test_batch_overrides_apply_to_all_files(fasta_file, tmp_path):
    other = tmp_path / "other.txt"
    other.write_text(">x\nMK\n")

    session = import_raw_seq(
        [fasta_file, str(other)], datatype="fasta", seqtype="amino_acid", session="s1"
    )

    assert all(r.datatype == DataType.FASTA for r in session.records())
    assert all(r.seqtype == SeqType.AMINO_ACID for r in session.records())


def test_batch_invalid_seqtype_fails_every_member(fasta_file, fastq_file):
    with pytest.warns(ImportFailedWarning) as record:
        session = import_raw_seq([fasta_file, fastq_file], seqtype="dna", session="s1")

    assert len(session) == 0
    assert len([w for w in record if issubclass(w.category, ImportFailedWarning)]) == 2


def test_default_session_used(fasta_file):
    session = import_raw_seq(fasta_file)

    assert session is get_session()


def test_import_accepts_session_object(fasta_file):
    session = Session("mine")

    returned = import_raw_seq([fasta_file], session=session)

    assert returned is session
    assert get_session("mine") is session
    assert fasta_file in session


def test_import_with_explicit_registry(fasta_file):
    own = SessionRegistry()

    session = import_raw_seq(fasta_file, session="s1", registry=own)

    assert own.get("s1") is session
    assert not registry.exists("s1")


def test_import_pathlike(tmp_path, fasta_file):
    from pathlib import Path

    session = import_raw_seq(Path(fasta_file), session="s1")

    assert fasta_file in session


def test_import_raw_seq_rejects_bytes_path(fasta_file):
    with pytest.raises(InvalidArgument):
        import_raw_seq(fasta_file.encode(), session="s1")
    with pytest.raises(InvalidArgument):
        import_raw_seq(bytearray(fasta_file.encode()), session="s1")

    assert not registry.exists("s1")


def test_import_rejects_second_session_with_registered_name(fasta_file, fastq_file):
    session = import_raw_seq(fasta_file, session="s1")

    with pytest.raises(InvalidArgument):
        import_raw_seq([fastq_file], session=Session("s1"))
    with pytest.raises(InvalidArgument):
        import_file(fastq_file, session=Session("s1"))

    assert get_session("s1") is session
    assert session.paths() == [fasta_file]


def test_import_reuses_registered_session_object(fasta_file, fastq_file):
    session = import_raw_seq(fasta_file, session="s1")

    returned = import_raw_seq([fastq_file], session=session)

    assert returned is session
    assert session.paths() == [fasta_file, fastq_file]
