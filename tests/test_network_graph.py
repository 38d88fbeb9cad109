import pytest

from tallerdatos.network_graph import NetworkLog, busiest, main

LINES = [
    "Aug 4 03:18:56 010.015.003.004:6000 Illegal user",
    "Aug 5 04:10:01 010.015.003.004:6001 Illegal user",
    "Sep 1 11:00:00 020.001.009.009:5000 Failed login",
]


def test_network_counts_in_sorted_order():
    log = NetworkLog(LINES)
    assert log.network_counts() == {"010.015": 2, "020.001": 1}
    assert list(log.network_counts()) == sorted(log.network_counts())


def test_busiest_networks():
    assert NetworkLog(LINES).busiest_networks() == ["010.015"]


def test_host_counts_group_by_host_part():
    log = NetworkLog(
        [
            "Aug 4 03:18:56 010.015.003.004:6000 Illegal user",
            "Aug 4 03:18:57 020.001.003.004:6000 Illegal user",
            "Aug 4 03:18:58 030.002.007.008:6000 Illegal user",
        ]
    )
    assert log.host_counts() == {"010.015.003.004": 2, "030.002.007.008": 1}
    assert log.busiest_hosts() == ["010.015.003.004"]


def test_host_counts_total_matches_lines():
    log = NetworkLog(LINES)
    assert sum(log.host_counts().values()) == len(LINES)
    assert sum(log.network_counts().values()) == len(LINES)


def test_busiest_keeps_ties_in_order():
    assert busiest({"a": 2, "b": 2, "c": 1}) == ["a", "b"]


def test_busiest_compares_counts_as_text():
    assert busiest({"a": 9, "b": 10}) == ["a"]


def test_busiest_of_nothing_raises():
    with pytest.raises(ValueError):
        busiest({})


def test_add_rejects_malformed_line():
    log = NetworkLog()
    with pytest.raises(ValueError):
        log.add("not a log line")


def test_short_address_has_no_host_part():
    log = NetworkLog(["Aug 4 03:18:56 1.2.3.4:80 Illegal user"])
    assert log.network_counts() == {"1.2": 1}
    with pytest.raises(ValueError):
        log.host_counts()


def test_main_prints_busiest(tmp_path, capsys):
    path = tmp_path / "log.txt"
    path.write_text("\n".join(LINES) + "\n", encoding="utf-8")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "010.015\n\n010.015.003.004\n"


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "missing.txt")]) == 1