import pytest
from recordkit.catalog import Catalog
from recordkit.catalog import schemas
from recordkit.core.exceptions import StoreException
from recordkit.core.record import Column, RecordDesc
from recordkit.core.types import FieldType
from recordkit.store import StoreSchema, IdentityPolicy


def make_schema(name, filename=None):
    desc = RecordDesc([Column("id", FieldType.INT)])
    return StoreSchema(name, desc, 4, key_field="id", identity=IdentityPolicy.SEQUENCE,
                       filename=filename)


class TestCatalog:
    """Tests for the schema registry."""

    def test_add_and_get(self):
        """Test registering and looking up a schema."""
        catalog = Catalog()
        schema = make_schema("things")
        catalog.add_schema(schema)

        assert catalog.schema_exists("things")
        assert catalog.get_schema("things") is schema
        assert catalog.get_schema_names() == ["things"]
        assert len(catalog) == 1
        assert list(catalog) == [schema]

    def test_duplicate_name(self):
        """Test that names are unique."""
        catalog = Catalog([make_schema("things")])
        with pytest.raises(StoreException, match="already exists"):
            catalog.add_schema(make_schema("things"))

    def test_duplicate_filename(self):
        """Test that two schemas cannot share a file."""
        catalog = Catalog([make_schema("a", "x.dat")])
        with pytest.raises(StoreException, match="reuses file"):
            catalog.add_schema(make_schema("b", "x.dat"))

    def test_get_missing(self):
        """Test lookup of an unknown name."""
        with pytest.raises(StoreException, match="not found"):
            Catalog().get_schema("nope")

    def test_open_store_loads_file(self, tmp_path):
        """Test that open_store reads the schema's file inside data_dir."""
        catalog = Catalog([make_schema("things", "things.dat")])
        store = catalog.open_store("things", tmp_path)
        store.insert({})
        store.save()
        assert (tmp_path / "things.dat").exists()

        reopened = catalog.open_store("things", tmp_path)
        assert len(reopened) == 1

    def test_open_store_without_load(self, tmp_path):
        """Test skipping the initial load."""
        catalog = Catalog([make_schema("things", "things.dat")])
        catalog.open_store("things", tmp_path).insert({})
        (tmp_path / "things.dat").write_bytes(b'\x01\x00\x00\x00')
        assert len(catalog.open_store("things", tmp_path, load=False)) == 0

    def test_open_in_memory_store(self, tmp_path):
        """Test that schemas without a file stay in memory."""
        store = Catalog([make_schema("temp")]).open_store("temp", tmp_path)
        assert store.file_path is None


class TestBuiltinSchemas:
    """Tests for the bundled schemas."""

    def test_builtin_names(self):
        """Test every program schema is registered."""
        catalog = Catalog.builtin()
        assert set(catalog.get_schema_names()) == {
            "seats", "contacts", "currencies", "patients", "doctors",
            "appointments", "books", "diary", "recipes", "students",
        }

    @pytest.mark.parametrize("schema, size", [
        (schemas.SEATS, 4 + 1 + 100),
        (schemas.CONTACTS, 100 + 20 + 100),
        (schemas.PATIENTS, 4 + 100 + 4 + 10),
        (schemas.DOCTORS, 4 + 100 + 100),
        (schemas.APPOINTMENTS, 4 + 4 + 4 + 20),
        (schemas.BOOKS, 4 + 100 + 100),
        (schemas.DIARY, 8 + 1024),
        (schemas.RECIPES, 100 + 2048 + 2048),
        (schemas.STUDENTS, 4 + 50 + 4 + 4 + 4),
    ])
    def test_record_sizes(self, schema, size):
        """Test the fixed record sizes of the data files."""
        assert schema.record_size == size

    def test_capacities(self):
        """Test capacities."""
        assert schemas.SEATS.capacity == 32
        assert schemas.CONTACTS.capacity == 100
        assert schemas.DOCTORS.capacity == 50
        assert schemas.APPOINTMENTS.capacity == 200
        assert schemas.RECIPES.capacity == 50

    def test_file_names(self):
        """Test the data file names."""
        assert schemas.SEATS.filename == "bus_reservation.dat"
        assert schemas.BOOKS.filename == "library.dat"
        assert schemas.CURRENCIES.filename is None
