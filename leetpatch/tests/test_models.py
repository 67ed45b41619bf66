import pytest
from pydantic import ValidationError

from leetpatch.models import PatchFile, PatchRecord


def test_patch_record_serializes_bytes_as_hex():
    record = PatchRecord(target_address=0x4A41, old=b"\x00\xff", new=b"\x10\xaa")

    data = record.model_dump(mode="json")

    assert data == {"target_address": 0x4A41, "old": "00FF", "new": "10AA"}


def test_patch_record_python_dump_keeps_bytes():
    record = PatchRecord(target_address=1, old=b"\x01", new=b"\x02")

    assert record.model_dump()["old"] == b"\x01"


def test_patch_record_str_uses_x64dbg_layout():
    record = PatchRecord(target_address=0xAF0200, old=b"\x13", new=b"\x37")

    assert str(record) == "0000000000AF0200:13->37"


def test_patch_record_rejects_negative_address():
    with pytest.raises(ValidationError):
        PatchRecord(target_address=-1, old=b"\x00", new=b"\x00")


def test_patch_record_rejects_empty_values():
    with pytest.raises(ValidationError):
        PatchRecord(target_address=0, old=b"", new=b"\x00")
    with pytest.raises(ValidationError):
        PatchRecord(target_address=0, old=b"\x00", new=b"")


def test_patch_record_is_frozen():
    record = PatchRecord(target_address=0, old=b"\x00", new=b"\x01")

    with pytest.raises(ValidationError):
        record.target_address = 5


def test_patch_record_equality_and_hash():
    a = PatchRecord(target_address=0x10, old=b"\xff", new=b"\x00")
    b = PatchRecord(target_address=0x10, old=b"\xff", new=b"\x00")

    assert a == b
    assert hash(a) == hash(b)


def test_patch_file_defaults_to_no_patches():
    patch_file = PatchFile(target_filename="a.bin")

    assert patch_file.patches == ()
    assert patch_file.addresses() == []


def test_patch_file_accepts_list_and_keeps_order():
    records = [
        PatchRecord(target_address=0x30, old=b"\x00", new=b"\x01"),
        PatchRecord(target_address=0x10, old=b"\x00", new=b"\x01"),
    ]

    patch_file = PatchFile(target_filename="a.bin", patches=records)

    assert patch_file.patches == tuple(records)
    assert patch_file.addresses() == [0x30, 0x10]


def test_patch_file_rejects_empty_filename():
    with pytest.raises(ValidationError):
        PatchFile(target_filename="")


def test_patch_file_rejects_unknown_fields():
    with pytest.raises(ValidationError):
        PatchFile(target_filename="a.bin", checksum="abc")


def test_patch_file_json_dump():
    patch_file = PatchFile(
        target_filename="a.bin",
        patches=(PatchRecord(target_address=0x10, old=b"\xff", new=b"\x00"),),
    )

    assert patch_file.model_dump(mode="json") == {
        "target_filename": "a.bin",
        "patches": [{"target_address": 16, "old": "FF", "new": "00"}],
    }
