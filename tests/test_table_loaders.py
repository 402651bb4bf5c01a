import json
import sys
from pathlib import Path

import pytest
import yaml

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from rankforge.core.table_loaders import coerce_cell, dump_rows, load_rows


def test_load_csv_strips_bom_and_coerces_numbers(tmp_path):
    path = tmp_path / "scores.csv"
    path.write_bytes(b"\xef\xbb\xbfname,score,ratio\nann,10,0.5\nbob,7,\n")
    rows = load_rows(path)
    assert rows == [
        {"name": "ann", "score": 10, "ratio": 0.5},
        {"name": "bob", "score": 7, "ratio": ""},
    ]


def test_load_json_list_and_rows_key(tmp_path):
    plain = tmp_path / "plain.json"
    plain.write_text(json.dumps([{"x": 1}, {"x": 2}]), encoding="utf-8")
    wrapped = tmp_path / "wrapped.json"
    wrapped.write_text(json.dumps({"rows": [{"x": 3}]}), encoding="utf-8")
    assert load_rows(plain) == [{"x": 1}, {"x": 2}]
    assert load_rows(wrapped) == [{"x": 3}]


def test_load_yaml_skips_non_mapping_rows(tmp_path):
    path = tmp_path / "rows.yml"
    path.write_text("- {name: a, score: 1}\n- just a string\n- {name: b, score: 2}\n", encoding="utf-8")
    assert load_rows(path) == [{"name": "a", "score": 1}, {"name": "b", "score": 2}]


def test_empty_yaml_is_empty_table(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_rows(path) == []


@pytest.mark.parametrize("name,content", [
    ("table.txt", "a,b\n1,2\n"),
    ("table.json", '{"a": 1}'),
])
def test_load_rejects_bad_tables(tmp_path, name, content):
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ValueError):
        load_rows(path)


def test_missing_file(tmp_path):
    with pytest.raises(ValueError):
        load_rows(tmp_path / "nope.csv")


def test_coerce_cell():
    assert coerce_cell("12") == 12
    assert coerce_cell(" 1.5 ") == 1.5
    assert coerce_cell("red") == "red"
    assert coerce_cell("") == ""


def test_dump_csv_unions_columns(tmp_path):
    path = tmp_path / "out" / "ranked.csv"
    dump_rows(path, [{"name": "a", "rank": 1}, {"name": "b", "rank": None, "note": "x"}])
    assert path.read_text(encoding="utf-8") == "name,rank,note\na,1,\nb,,x\n"


def test_dump_yaml_and_json(tmp_path):
    rows = [{"name": "a", "rank": 1.5}]
    dump_rows(tmp_path / "r.yaml", rows)
    dump_rows(tmp_path / "r.json", rows)
    assert yaml.safe_load((tmp_path / "r.yaml").read_text(encoding="utf-8")) == rows
    assert json.loads((tmp_path / "r.json").read_text(encoding="utf-8")) == rows


def test_dump_rejects_unknown_suffix(tmp_path):
    with pytest.raises(ValueError):
        dump_rows(tmp_path / "r.xlsx", [])
