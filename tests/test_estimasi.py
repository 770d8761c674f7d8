import pytest

from pengiriman.estimasi import (
    MSG_MISSING_CITY,
    MSG_NO_ROUTE,
    MSG_SAME_CITY,
    EstimateError,
    EstimateTable,
    load_estimates,
    route_key,
)


@pytest.fixture
def table(tmp_path):
    path = tmp_path / "EstimasiKota.txt"
    path.write_text("Jakarta,Bandung,1\nSurabaya,Malang,2\n", encoding="utf-8")
    return load_estimates(path)


def test_route_key_is_symmetric():
    assert route_key("Jakarta", "Bandung") == route_key("Bandung", "Jakarta")
    assert route_key("Jakarta", "Bandung") == "Bandung-Jakarta"


def test_lookup_both_directions(table):
    assert table.lookup("Jakarta", "Bandung") == 1
    assert table.lookup("Bandung", "Jakarta") == 1
    assert table.lookup("Malang", "Surabaya") == 2


def test_describe_found(table):
    assert table.describe("Bandung", "Jakarta") == (
        "Estimasi Dari Bandung ke Jakarta adalah 1 hari"
    )


def test_describe_unknown_route(table):
    assert table.describe("Jakarta", "Malang") == MSG_NO_ROUTE


def test_same_city_rejected(table):
    with pytest.raises(EstimateError, match=MSG_SAME_CITY):
        table.lookup("Jakarta", "Jakarta")


@pytest.mark.parametrize("origin,destination", [("", "Jakarta"), ("Jakarta", ""), ("", "")])
def test_missing_city_rejected(table, origin, destination):
    with pytest.raises(EstimateError) as info:
        table.lookup(origin, destination)
    assert str(info.value) == MSG_MISSING_CITY


def test_missing_file_gives_empty_table(tmp_path):
    table = load_estimates(tmp_path / "absent.txt")
    assert table.estimates == {}
    assert table.describe("Jakarta", "Bandung") == MSG_NO_ROUTE


def test_day_field_parsed_like_leading_integer(tmp_path):
    path = tmp_path / "e.txt"
    path.write_text("Jakarta,Malang, 3 hari\nBandung,Malang,abc\n", encoding="utf-8")
    table = load_estimates(path)
    assert table.lookup("Malang", "Jakarta") == 3
    assert table.lookup("Bandung", "Malang") == 0


def test_later_line_overrides(tmp_path):
    path = tmp_path / "e.txt"
    path.write_text("Jakarta,Bandung,1\nBandung,Jakarta,4\n", encoding="utf-8")
    assert load_estimates(path).lookup("Jakarta", "Bandung") == 4


def test_table_built_directly():
    table = EstimateTable({route_key("A", "B"): 7})
    assert table.lookup("B", "A") == 7