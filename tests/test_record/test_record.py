import pytest
from recordkit.core.record import Column, RecordDesc, Record, RecordId
from recordkit.core.types import FieldType, IntField, StringField


@pytest.fixture
def desc():
    return RecordDesc([
        Column("id", FieldType.INT),
        Column("name", FieldType.STRING, 8),
        Column("booked", FieldType.BOOLEAN),
    ])


class TestRecord:
    """Tests for Record."""

    def test_from_values(self, desc):
        """Test building a complete record."""
        record = Record.from_values(desc, {"id": 1, "name": "Ann", "booked": True})
        assert record.is_complete()
        assert record["id"] == 1
        assert record["name"] == "Ann"
        assert record.get_value("booked") is True

    def test_from_values_missing(self, desc):
        """Test that every column needs a value."""
        with pytest.raises(ValueError, match="Missing value for field 'booked'"):
            Record.from_values(desc, {"id": 1, "name": "Ann"})

    def test_from_values_unknown(self, desc):
        """Test that unknown names are rejected."""
        with pytest.raises(ValueError, match="Unknown fields: extra"):
            Record.from_values(desc, {"id": 1, "name": "A", "booked": False, "extra": 1})

    def test_from_values_too_long(self, desc):
        """Test that text wider than the column is rejected."""
        with pytest.raises(ValueError, match="String too long"):
            Record.from_values(desc, {"id": 1, "name": "Bartholomew", "booked": False})

    def test_set_field_type_mismatch(self, desc):
        """Test that fields must match the column type."""
        record = Record(desc)
        with pytest.raises(TypeError):
            record.set_field(0, StringField("x", width=4))

    def test_set_field_width_mismatch(self, desc):
        """Test that string fields must match the column width."""
        record = Record(desc)
        with pytest.raises(ValueError, match="expects 8 bytes"):
            record.set_field(1, StringField("x", width=4))

    def test_get_unset_field(self, desc):
        """Test reading a field that was never set."""
        record = Record(desc)
        assert not record.is_complete()
        with pytest.raises(ValueError, match="has not been set"):
            record.get_field(0)

    def test_serialize_layout(self, desc):
        """Test the exact byte layout."""
        record = Record.from_values(desc, {"id": 2, "name": "Bo", "booked": True})
        data = record.serialize()
        assert data == b'\x02\x00\x00\x00' + b'Bo' + b'\x00' * 6 + b'\x01'
        assert len(data) == desc.get_size()

    def test_serialize_incomplete(self, desc):
        """Test that incomplete records cannot be encoded."""
        with pytest.raises(ValueError, match="incomplete"):
            Record(desc).serialize()

    def test_deserialize(self, desc):
        """Test decoding the layout back into a record."""
        data = b'\x07\x00\x00\x00' + b'Cy\x00' + b'\xaa' * 5 + b'\x00'
        record = Record.deserialize(data, desc)
        assert record.to_dict() == {"id": 7, "name": "Cy", "booked": False}

    def test_deserialize_wrong_size(self, desc):
        """Test size check."""
        with pytest.raises(ValueError, match="exactly 13 bytes"):
            Record.deserialize(b'\x00' * 12, desc)

    def test_copy_is_independent(self, desc):
        """Test that changing a copy leaves the original alone."""
        record = Record.from_values(desc, {"id": 1, "name": "Ann", "booked": False})
        clone = record.copy()
        clone.set_value("name", "Bea")
        assert record["name"] == "Ann"
        assert clone["name"] == "Bea"
        assert record != clone

    def test_equality(self, desc):
        """Test equality by schema and values."""
        a = Record.from_values(desc, {"id": 1, "name": "Ann", "booked": False})
        b = Record.from_values(desc, {"id": 1, "name": "Ann", "booked": False})
        assert a == b
        assert hash(a) == hash(b)

    def test_str(self, desc):
        """Test tab-separated form."""
        record = Record.from_values(desc, {"id": 1, "name": "Ann", "booked": False})
        assert str(record) == "1\tAnn\tFalse"
        assert str(Record(desc)) == "<incomplete record>"

    def test_set_field(self, desc):
        """Test direct field assignment."""
        record = Record(desc)
        record.set_field(0, IntField(9))
        assert record.get_field(0) == IntField(9)


class TestRecordId:
    """Tests for RecordId."""

    def test_fields(self):
        """Test attributes and equality."""
        rid = RecordId(3, identity=4)
        assert rid.position == 3
        assert rid.identity == 4
        assert rid == RecordId(3, 4)

    def test_negative_position(self):
        """Test that positions are non-negative."""
        with pytest.raises(ValueError):
            RecordId(-1)
