# ===============================================
# tests/test_staging.py
# Allow-list filtering, replace-on-add, remove/clear, snapshots.
# ===============================================
import pytest

from src.session import AttachmentIndexOutOfRange, AttachmentStaging, GenerationRequest
from src.session.staging import is_allowed

from tests.conftest import make_file


@pytest.mark.parametrize("name", ["a.json", "B.JSON", "site.framer", "x.zip", "n.txt", "c.js", "c.jsx", "c.ts", "C.TSX"])
def test_allowed_names(name):
    assert is_allowed(name)


@pytest.mark.parametrize("name", ["photo.png", "json", "a.json.bak", "readme.md", ""])
def test_rejected_names(name):
    assert not is_allowed(name)


def test_add_keeps_allowed_subset_in_order():
    s = AttachmentStaging()
    batch = [make_file("b.txt"), make_file("pic.png"), make_file("a.json"), make_file("z.TS")]
    accepted = s.add(batch)
    assert [f.name for f in accepted] == ["b.txt", "a.json", "z.TS"]
    assert s.names() == ["b.txt", "a.json", "z.TS"]


def test_add_replaces_previous_batch():
    s = AttachmentStaging()
    s.add([make_file("old.json")])
    s.add([make_file("new.json")])
    assert s.names() == ["new.json"]


def test_add_is_bounded():
    s = AttachmentStaging(max_files=2)
    s.add([make_file(f"{i}.json") for i in range(5)])
    assert s.names() == ["0.json", "1.json"]


def test_remove_preserves_order_of_rest():
    s = AttachmentStaging()
    s.add([make_file(n) for n in ("a.json", "b.json", "c.json")])
    removed = s.remove(1)
    assert removed.name == "b.json"
    assert s.names() == ["a.json", "c.json"]


@pytest.mark.parametrize("index", [-1, 2, 10])
def test_remove_out_of_range(index):
    s = AttachmentStaging()
    s.add([make_file("a.json"), make_file("b.json")])
    with pytest.raises(AttachmentIndexOutOfRange):
        s.remove(index)
    assert s.names() == ["a.json", "b.json"]


def test_out_of_range_is_an_index_error():
    with pytest.raises(IndexError):
        AttachmentStaging().remove(0)


def test_clear_is_idempotent():
    s = AttachmentStaging()
    s.add([make_file("a.json")])
    s.clear()
    s.clear()
    assert s.list() == ()
    assert len(s) == 0


def test_snapshot_unaffected_by_later_mutation():
    s = AttachmentStaging()
    s.add([make_file("a.json"), make_file("b.json")])
    request = GenerationRequest(final_prompt="p", attachments=s.list())
    s.remove(0)
    s.clear()
    assert [a.name for a in request.attachments] == ["a.json", "b.json"]
