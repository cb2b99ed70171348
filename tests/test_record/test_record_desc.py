import pytest
from recordkit.core.record import Column, RecordDesc
from recordkit.core.types import FieldType


@pytest.fixture
def desc():
    return RecordDesc([
        Column("id", FieldType.INT),
        Column("name", FieldType.STRING, 10),
        Column("active", FieldType.BOOLEAN),
    ])


class TestRecordDesc:
    """Tests for RecordDesc."""

    def test_requires_columns(self):
        """Test that an empty descriptor is rejected."""
        with pytest.raises(ValueError, match="at least one column"):
            RecordDesc([])

    def test_duplicate_names(self):
        """Test that column names must be unique."""
        with pytest.raises(ValueError, match="Duplicate column names: a"):
            RecordDesc([Column("a", FieldType.INT), Column("a", FieldType.LONG)])

    def test_size_and_offsets(self, desc):
        """Test packed offsets with no padding."""
        assert desc.get_size() == 4 + 10 + 1
        assert desc.get_field_offset(0) == 0
        assert desc.get_field_offset(1) == 4
        assert desc.get_field_offset(2) == 14

    def test_lookup(self, desc):
        """Test name and index accessors."""
        assert desc.num_fields() == 3
        assert desc.get_field_names() == ["id", "name", "active"]
        assert desc.name_to_index("active") == 2
        assert desc.get_field_type(1) == FieldType.STRING
        assert desc.get_field_name(0) == "id"
        assert desc.has_field("name")
        assert not desc.has_field("missing")

    def test_name_to_index_missing(self, desc):
        """Test lookup of an unknown name."""
        with pytest.raises(ValueError, match="not found"):
            desc.name_to_index("missing")

    def test_index_out_of_range(self, desc):
        """Test lookup of an unknown index."""
        with pytest.raises(IndexError):
            desc.get_column(3)

    def test_equality(self, desc):
        """Test equality by columns."""
        same = RecordDesc([
            Column("id", FieldType.INT),
            Column("name", FieldType.STRING, 10),
            Column("active", FieldType.BOOLEAN),
        ])
        wider = RecordDesc([
            Column("id", FieldType.INT),
            Column("name", FieldType.STRING, 11),
            Column("active", FieldType.BOOLEAN),
        ])
        assert desc == same
        assert hash(desc) == hash(same)
        assert desc != wider
        assert not desc.equals("not a desc")
