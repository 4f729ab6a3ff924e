import pytest

# Skip all tests if pandas is not installed
pytest.importorskip("pandas")

import pandas as pd  # noqa: E402

from valdox import SchemaBuilder, register_accessor, v, validate_dataframe  # noqa: E402


@pytest.fixture
def schema() -> SchemaBuilder:
    return (
        SchemaBuilder("person")
        .add("age", "age", v.number.between(0, 120))
        .add("name", lambda row: row["name"], v.string.length.min(1))
    )


@pytest.fixture
def people() -> pd.DataFrame:
    return pd.DataFrame(
        {"age": [25, 150, 30], "name": ["Ada", "", "Linus"]},
        index=["a", "b", "c"],
    )


class TestValidateDataFrame:
    """Test validate_dataframe function."""

    def test_errors_per_row(self, schema: SchemaBuilder, people: pd.DataFrame) -> None:
        """Each row gets its own error list, aligned with the index."""
        result = validate_dataframe(people, schema)

        assert result.name == "errors"
        assert list(result.index) == ["a", "b", "c"]
        assert result["a"] == []
        assert result["c"] == []
        assert result["b"] == [
            "ValidationError: 'rows[b].age' received 150, expected value between 0 and 120.",
            "ValidationError: 'rows[b].name' received \"\", expected length >= 1.",
        ]

    def test_custom_root_label_and_stop(
        self, schema: SchemaBuilder, people: pd.DataFrame
    ) -> None:
        """The root label prefixes every path and stop_on_error applies per row."""
        result = validate_dataframe(people, schema, root_label="people", stop_on_error=True)
        assert result["b"] == [
            "ValidationError: 'people[b].age' received 150, expected value between 0 and 120."
        ]

    def test_empty_frame(self, schema: SchemaBuilder) -> None:
        """An empty DataFrame yields an empty Series."""
        result = validate_dataframe(pd.DataFrame({"age": [], "name": []}), schema)
        assert result.empty


class TestAccessor:
    """Test the registered DataFrame accessor."""

    def test_accessor(self, schema: SchemaBuilder, people: pd.DataFrame) -> None:
        """The accessor exposes validate() and is_valid()."""
        register_accessor()

        valid = people.valdox.is_valid(schema)
        assert valid.dtype == bool
        assert valid.tolist() == [True, False, True]

        errors = people.valdox.validate(schema)
        assert errors.map(len).tolist() == [0, 2, 0]

    def test_register_is_idempotent(self) -> None:
        """Registering twice keeps the first accessor."""
        register_accessor("valdox_checks")
        register_accessor("valdox_checks")
        assert hasattr(pd.DataFrame, "valdox_checks")
