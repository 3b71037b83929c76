from pagesort.core.sorting.collation import collation_key


def ordered(labels, collation="locale"):
    return sorted(labels, key=lambda label: collation_key(label, collation))


def test_character_classes():
    assert ordered(["b", "1", "---", " x", "+plus"]) == [" x", "---", "+plus", "1", "b"]


def test_empty_string_sorts_first():
    assert ordered(["a", "", "-"]) == ["", "-", "a"]
    assert ordered(["a", "", "-"], "codepoint") == ["", "-", "a"]


def test_case_and_accents_are_secondary():
    assert ordered(["B", "a", "A", "b"]) == ["a", "A", "b", "B"]
    assert ordered(["resumes", "résumé", "resume"]) == ["resume", "résumé", "resumes"]


def test_order_is_total():
    assert collation_key("ﬁle") != collation_key("file")
    assert ordered(["ﬁle", "file"]) == ordered(["file", "ﬁle"])


def test_unmarked_letters_sort_with_their_base():
    assert ordered(["o", "p", "z", "ø"]) == ["o", "ø", "p", "z"]
    assert ordered(["z", "lódź", "łódź", "m"]) == ["lódź", "łódź", "m", "z"]
    assert ordered(["af", "æ", "ad"]) == ["ad", "æ", "af"]
    assert ordered(["Þorn", "Zed", "Tom"]) == ["Þorn", "Tom", "Zed"]
