import csv
import io

from xpslash.gdpr import DELETED_MESSAGE, MISMATCH_MESSAGE, deletion_message, levels_csv


def test_empty_records_give_empty_file():
    assert levels_csv([]) == b""


def test_header_and_rows():
    data = levels_csv([(11, 250), (22, 0)])
    lines = data.decode("utf-8").splitlines()
    assert lines[0] == "guild,xp"
    assert len(lines) == 3


def test_round_trip_through_reader():
    records = [(111, 5), (222, 9000), (333, 1)]
    rows = list(csv.DictReader(io.StringIO(levels_csv(records).decode("utf-8"))))
    assert [(int(r["guild"]), int(r["xp"])) for r in rows] == records


def test_lines_end_with_newline():
    assert levels_csv([(1, 2)]).endswith(b"\n")
    assert b"\r" not in levels_csv([(1, 2)])


def test_deletion_matches():
    assert deletion_message(42, 42) == "All data wiped. Thank you for using experienced."


def test_deletion_mismatch():
    assert deletion_message(42, 43) == MISMATCH_MESSAGE
    assert deletion_message(43, 42) != DELETED_MESSAGE