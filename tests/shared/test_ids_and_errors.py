import pytest
from protean.exceptions import ValidationError

from marketplace.shared.errors import ConflictError, MarketplaceError
from marketplace.shared.ids import ensure_object_id, is_object_id, new_object_id


class TestObjectIds:
    def test_new_ids_are_24_hex_characters(self):
        value = new_object_id()
        assert len(value) == 24
        assert is_object_id(value)

    @pytest.mark.parametrize("value", ["", "abc", "z" * 24, None, 42])
    def test_malformed_ids(self, value):
        assert not is_object_id(value)

    def test_ensure_names_the_field(self):
        with pytest.raises(ValidationError) as exc:
            ensure_object_id("nope", "order_id")
        assert "order_id" in exc.value.messages


class TestErrors:
    def test_context_is_kept(self):
        error = ConflictError("Duplicate", email="a@example.com")
        assert error.message == "Duplicate"
        assert error.context == {"email": "a@example.com"}
        assert str(error) == "Duplicate"

    def test_conflict_is_a_marketplace_error(self):
        assert issubclass(ConflictError, MarketplaceError)
