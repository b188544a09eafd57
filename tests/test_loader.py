"""Tests for skilltree.loader — strict TOML/dict mapping onto NodeRecords."""

from pathlib import Path

import pytest

from skilltree.errors import RecordError
from skilltree.loader import load, loads, record_from_dict, records_from_list
from skilltree.types import Item, NodeRecord

SAMPLE = '''
[[feature]]
name = "mut_ref"
label = "&mut T"

[[feature]]
name = "heap"
label = """Heap
allocation"""
href = "https://example.org/heap"
requires = ["mut_ref"]
items = [{ label = "Box" }, "Vec"]
'''


class TestRecordFromDict:
    def test_defaults(self):
        rec = record_from_dict({"name": "a", "label": "A"})
        assert rec == NodeRecord(name="a", label="A", href=None, requires=(), items=())

    def test_explicit_empty_requires_equals_omitted(self):
        assert record_from_dict({"name": "a", "label": "A", "requires": []}) == record_from_dict(
            {"name": "a", "label": "A"}
        )

    def test_full_record(self):
        rec = record_from_dict(
            {"name": "a", "label": "A", "href": "https://x", "requires": ["b"], "items": [{"label": "i"}]}
        )
        assert rec.href == "https://x"
        assert rec.requires == ("b",)
        assert rec.items == (Item("i"),)

    def test_misspelled_field_rejected(self):
        with pytest.raises(RecordError, match="unknown fields: require"):
            record_from_dict({"name": "a", "label": "A", "require": ["b"]}, position=3)

    def test_missing_label_rejected(self):
        with pytest.raises(RecordError) as exc:
            record_from_dict({"name": "a"}, position=2)
        assert exc.value.position == 2
        assert exc.value.field == "label"

    def test_wrong_type_rejected(self):
        with pytest.raises(RecordError) as exc:
            record_from_dict({"name": "a", "label": "A", "requires": "b"})
        assert exc.value.field == "requires"

    def test_non_string_requirement_rejected(self):
        with pytest.raises(RecordError):
            record_from_dict({"name": "a", "label": "A", "requires": [1]})

    def test_item_with_extra_key_rejected(self):
        with pytest.raises(RecordError, match="unknown item keys"):
            record_from_dict({"name": "a", "label": "A", "items": [{"label": "x", "href": "y"}]})

    def test_non_table_rejected(self):
        with pytest.raises(RecordError):
            record_from_dict(["a"])  # type: ignore[arg-type]


class TestLoads:
    def test_sample(self):
        records = loads(SAMPLE)
        assert [r.name for r in records] == ["mut_ref", "heap"]
        heap = records[1]
        assert heap.label == "Heap\nallocation"
        assert heap.requires == ("mut_ref",)
        assert heap.items == (Item("Box"), Item("Vec"))

    def test_empty_document(self):
        assert loads("") == []

    def test_duplicate_names_survive_loading(self):
        """Duplicates are a graph error, reported later by the builder."""
        src = '[[feature]]\nname = "float"\nlabel = "a"\n[[feature]]\nname = "float"\nlabel = "b"\n'
        assert [r.name for r in loads(src)] == ["float", "float"]

    def test_invalid_toml(self):
        with pytest.raises(RecordError, match="invalid TOML"):
            loads("[[feature]\nname=")

    def test_unknown_top_level_key(self):
        with pytest.raises(RecordError, match="unknown top-level keys"):
            loads('title = "x"\n')

    def test_records_from_list_positions(self):
        with pytest.raises(RecordError) as exc:
            records_from_list([{"name": "a", "label": "A"}, {"name": "b"}])
        assert exc.value.position == 1

    def test_load_file(self, tmp_path: Path):
        path = tmp_path / "tree.toml"
        path.write_text(SAMPLE, encoding="utf-8")
        assert len(load(path)) == 2
