import pytest
from recordkit.core.record import Column
from recordkit.core.types import FieldType, IntField, StringField, BoolField


class TestColumn:
    """Tests for Column."""

    def test_fixed_sizes(self):
        """Test sizes of fixed-width columns."""
        assert Column("a", FieldType.INT).get_size() == 4
        assert Column("b", FieldType.LONG).get_size() == 8
        assert Column("c", FieldType.DOUBLE).get_size() == 8
        assert Column("d", FieldType.BOOLEAN).get_size() == 1

    def test_string_size_is_width(self):
        """Test that a STRING column is as wide as declared."""
        assert Column("name", FieldType.STRING, 100).get_size() == 100

    def test_string_requires_width(self):
        """Test STRING width validation."""
        with pytest.raises(ValueError, match="width of at least 2"):
            Column("name", FieldType.STRING)
        with pytest.raises(ValueError, match="width of at least 2"):
            Column("name", FieldType.STRING, 1)

    def test_fixed_type_rejects_width(self):
        """Test that fixed types cannot carry a width."""
        with pytest.raises(ValueError, match="cannot have a width"):
            Column("age", FieldType.INT, 4)

    def test_fixed_types(self):
        """Test which types take their size from the column width."""
        assert FieldType.INT.is_fixed()
        assert FieldType.BOOLEAN.is_fixed()
        assert not FieldType.STRING.is_fixed()

    def test_empty_name(self):
        """Test that a column needs a name."""
        with pytest.raises(ValueError):
            Column("", FieldType.INT)

    def test_make_field(self):
        """Test building fields of the column's type."""
        assert Column("a", FieldType.INT).make_field(3) == IntField(3)
        assert isinstance(Column("b", FieldType.BOOLEAN).make_field(True), BoolField)

        field = Column("s", FieldType.STRING, 10).make_field("hi")
        assert isinstance(field, StringField)
        assert field.get_size() == 10

    def test_read_field(self):
        """Test decoding with a size check."""
        column = Column("s", FieldType.STRING, 4)
        assert column.read_field(b'ab\x00\x00').get_value() == "ab"

        with pytest.raises(ValueError, match="needs 4 bytes"):
            column.read_field(b'ab\x00')

    def test_str(self):
        """Test string form."""
        assert str(Column("s", FieldType.STRING, 4)) == "string[4](s)"
        assert str(Column("a", FieldType.INT)) == "int(a)"
