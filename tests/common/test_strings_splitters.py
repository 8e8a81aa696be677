from qcprobe.common.strings.splitters import csv_to_list, first_token


def test_csv_to_list_none():
    assert csv_to_list(None) == []


def test_csv_to_list_list_input():
    assert csv_to_list([" a ", "b", "", "  "]) == ["a", "b"]


def test_csv_to_list_string_input():
    assert csv_to_list(" CPL*.xml, cpl*.xml ,, ") == ["CPL*.xml", "cpl*.xml"]


def test_first_token():
    assert first_token("mov,mp4,m4a,3gp,3g2,mj2") == "mov"
    assert first_token(" ,MPEGTS") == "mpegts"
    assert first_token(None) == ""
    assert first_token("a|b", sep="|") == "a"
