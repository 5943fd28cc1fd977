import pytest

from scbtables.data.schema import ColumnKind, index_columns
from scbtables.errors import ParseError, UnknownColumnError


def test_positions_count_keys_and_measures_independently():
    index = index_columns(
        [
            {"code": "Region", "type": "d"},
            {"code": "Price", "type": "c"},
            {"code": "Tid", "type": "t"},
            {"code": "Change", "type": "c"},
            {"code": "Unit"},
        ]
    )
    assert index.codes() == ["Region", "Price", "Tid", "Change", "Unit"]
    assert index.kinds() == [
        ColumnKind.KEY,
        ColumnKind.MEASURE,
        ColumnKind.KEY,
        ColumnKind.MEASURE,
        ColumnKind.KEY,
    ]
    keys = [c.position for c in index.columns if c.kind == ColumnKind.KEY]
    measures = [c.position for c in index.columns if c.kind == ColumnKind.MEASURE]
    assert keys == [0, 1, 2]
    assert measures == [0, 1]
    assert index.key_count == 3
    assert index.measure_count == 2
    assert index.position_of("Change") == 1
    assert index.kind_of("Unit") == ColumnKind.KEY


def test_only_c_tag_is_a_measure():
    assert ColumnKind.from_type_tag("c") == ColumnKind.MEASURE
    for tag in ("d", "t", "C", "", None):
        assert ColumnKind.from_type_tag(tag) == ColumnKind.KEY


def test_column_text_is_kept():
    index = index_columns([{"code": "Tid", "type": "t", "text": "month"}])
    col = index.descriptor("Tid")
    assert col.text == "month"
    assert col.type_tag == "t"


def test_unknown_column_lookup():
    index = index_columns([{"code": "Region", "type": "d"}])
    assert "Region" in index
    assert "Other" not in index
    with pytest.raises(UnknownColumnError):
        index.descriptor("Other")


def test_malformed_columns():
    with pytest.raises(ParseError):
        index_columns([{"type": "c"}])
    with pytest.raises(ParseError):
        index_columns(["Region"])
    with pytest.raises(ParseError):
        index_columns([{"code": "A", "type": "d"}, {"code": "A", "type": "c"}])
