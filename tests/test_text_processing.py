from pagesort.utils.io_helpers import BOM, read_utf8, read_utf8_with_bom, write_utf8
from pagesort.utils.text_processing import (
    detect_newline, drop_blank_lines, join_lines, repair_labels, split_lines,
)


def test_split_lines():
    assert split_lines("a\r\nb\rc\n") == ["a", "b", "c"]
    assert split_lines("a\n\nb") == ["a", "", "b"]
    assert split_lines("\n") == [""]
    assert split_lines("") == []


def test_join_lines():
    assert join_lines(["a", "b"]) == "a\nb\n"
    assert join_lines(["a", "b"], trailing_newline=False) == "a\nb"
    assert join_lines([]) == ""


def test_drop_blank_lines():
    assert drop_blank_lines(["a", "", "  ", "b"]) == ["a", "b"]


def test_repair_labels():
    assert repair_labels(["CafÃ©", "Card"]) == ["Café", "Card"]


def test_read_utf8_strips_bom(tmp_path):
    path = tmp_path / "pages.txt"
    path.write_bytes(BOM + "Card\n".encode("utf-8"))
    assert read_utf8(path) == "Card\n"


def test_write_utf8_keeps_text_verbatim(tmp_path):
    path = tmp_path / "out" / "pages.txt"
    write_utf8(path, "ﬁle\r\n\U0001F680 GO\n")
    assert path.read_bytes().decode("utf-8") == "ﬁle\r\n\U0001F680 GO\n"


def test_join_lines_with_crlf():
    assert join_lines(["a", "b"], newline="\r\n") == "a\r\nb\r\n"


def test_detect_newline():
    assert detect_newline("a\r\nb\n") == "\r\n"
    assert detect_newline("a\rb") == "\r"
    assert detect_newline("a\nb\r\n") == "\n"
    assert detect_newline("single") == "\n"


def test_bom_survives_read_and_write(tmp_path):
    path = tmp_path / "pages.txt"
    path.write_bytes(BOM + b"Card\r\n")
    text, bom = read_utf8_with_bom(path)
    assert (text, bom) == ("Card\r\n", True)
    write_utf8(path, text, bom=bom)
    assert path.read_bytes() == BOM + b"Card\r\n"
