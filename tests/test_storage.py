import pytest

from todolist.models import Active, Completed, Err, Ok
from todolist.storage import (
    LocalFileStore,
    decode,
    encode,
    read_lines,
    split_records,
    write_text,
)


def test_encode():
    items = [Active("buy milk"), Completed("pay rent")]
    assert encode(items) == "a, buy milk\nc, pay rent"
    assert encode([]) == ""


def test_decode_example():
    assert decode("a, buy milk\nc, pay rent".splitlines()) == Ok(
        (Active("buy milk"), Completed("pay rent"))
    )


def test_decode_empty_is_empty_list():
    assert decode([]) == Ok(())
    assert decode(["", "   "]) == Ok(())


def test_decode_trims_fields():
    assert decode(["  a ,   spaced out  ", "c,tight"]) == Ok(
        (Active("spaced out"), Completed("tight"))
    )


def test_decode_drops_unknown_tags():
    assert decode(["x, mystery", "a, kept"]) == Ok((Active("kept"),))


def test_decode_malformed_line_fails_whole_decode():
    result = decode(["a, fine", "no comma here", "c, also fine"])
    assert isinstance(result, Err)
    assert "line 2" in result.error


def test_decode_ignores_extra_fields():
    assert decode(["a, first, second"]) == Ok((Active("first"),))


@pytest.mark.parametrize("line", ["a,", "c,,", "a"])
def test_decode_empty_trailing_fields_are_malformed(line):
    assert isinstance(decode([line]), Err)


def test_decode_blank_name_after_separator():
    assert decode(["a, "]) == Ok((Active(""),))


ROUND_TRIP_LISTS = [
    (),
    (Active("one"),),
    (Active("one"), Completed("two"), Active("three four"), Completed("")),
    (Active(""), Active("")),
    (Active("page\x0cbreak"), Active("other")),
    (Completed("tab\there"), Active("vt\x0bfs\x1cgs\x1drs\x1eend")),
    (Active("nel\x85ls\u2028ps\u2029end"), Completed("caf\u00e9 \u2713 \u4e2d\u6587")),
    (Active("padded"), Completed("semi;colon"), Active("quote\"s")),
]


@pytest.mark.parametrize("items", ROUND_TRIP_LISTS)
def test_round_trip(items):
    assert decode(split_records(encode(items))) == Ok(items)


@pytest.mark.parametrize("items", ROUND_TRIP_LISTS)
def test_round_trip_through_file(tmp_path, items):
    store = LocalFileStore()
    path = str(tmp_path / "todos.csv")
    assert store.write(path, encode(items)) == Ok(None)
    result = store.read_lines(path)
    assert isinstance(result, Ok)
    assert decode(result.value) == Ok(items)


def test_form_feed_in_name_survives_reload(tmp_path):
    store = LocalFileStore()
    path = str(tmp_path / "todos.csv")
    items = (Active("page\x0cbreak"), Active("other"))
    store.write(path, encode(items))
    assert store.read_lines(path) == Ok(["a, page\x0cbreak", "a, other"])


def test_split_records():
    assert split_records("") == []
    assert split_records("a, x\n") == ["a, x"]
    assert split_records("a, x\n\nc, y") == ["a, x", "", "c, y"]
    assert split_records("a, x\x0cy") == ["a, x\x0cy"]


def test_write_then_read(tmp_path):
    path = str(tmp_path / "todos.csv")
    assert write_text(path, "a, x\nc, y") == Ok(None)
    assert read_lines(path) == Ok(["a, x", "c, y"])


def test_read_missing_file_is_err(tmp_path):
    result = read_lines(str(tmp_path / "missing.csv"))
    assert isinstance(result, Err)
    assert "missing.csv" in result.error


def test_write_into_missing_directory_is_err(tmp_path):
    result = write_text(str(tmp_path / "nope" / "todos.csv"), "a, x")
    assert isinstance(result, Err)


def test_read_undecodable_bytes_is_err(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_bytes(b"\xff\xfe\xfa")
    assert isinstance(read_lines(str(path)), Err)


def test_local_file_store(tmp_path):
    store = LocalFileStore()
    path = str(tmp_path / "todos.csv")
    assert store.write(path, "a, milk") == Ok(None)
    assert store.read_lines(path) == Ok(["a, milk"])
