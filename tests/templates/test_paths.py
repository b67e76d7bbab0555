"""Tests for dot-path resolution."""

from datafmt.templates.paths import NOT_FOUND, is_missing, resolve_path


class TestResolvePath:
    """Test resolve_path against nested data."""

    def test_top_level_key(self):
        """Single segment returns the value."""
        assert resolve_path({"name": "John Doe"}, "name") == "John Doe"

    def test_nested_key(self):
        """Dots walk into nested mappings."""
        data = {"address": {"city": "New York", "country": "USA"}}
        assert resolve_path(data, "address.city") == "New York"

    def test_list_index(self):
        """Numeric segments index into lists."""
        data = {"items": ["apple", "banana", "cherry"]}
        assert resolve_path(data, "items.0") == "apple"
        assert resolve_path(data, "items.2") == "cherry"

    def test_list_index_out_of_range(self):
        """Index past the end is not found."""
        assert resolve_path({"items": ["apple"]}, "items.1") is NOT_FOUND

    def test_non_canonical_index(self):
        """Only canonical decimal indexes address list items."""
        data = {"items": ["apple", "banana"]}
        assert resolve_path(data, "items.01") is NOT_FOUND
        assert resolve_path(data, "items.-1") is NOT_FOUND

    def test_nested_inside_list(self):
        """Lists of objects can be traversed."""
        data = {"users": [{"name": "Ann"}, {"name": "Bob"}]}
        assert resolve_path(data, "users.1.name") == "Bob"

    def test_empty_path(self):
        """Empty path is not found."""
        assert resolve_path({"": "x"}, "") is NOT_FOUND

    def test_missing_key(self):
        """Absent key is not found."""
        assert resolve_path({}, "missing") is NOT_FOUND

    def test_deeply_nested_missing(self):
        """A missing intermediate segment stops resolution."""
        data = {"address": {"city": "New York"}}
        assert resolve_path(data, "address.location.zip") is NOT_FOUND

    def test_scalar_is_not_indexable(self):
        """Strings and numbers cannot be stepped into."""
        assert resolve_path({"name": "John"}, "name.0") is NOT_FOUND
        assert resolve_path({"count": 3}, "count.value") is NOT_FOUND

    def test_present_null_is_returned(self):
        """A present None is distinct from not found."""
        result = resolve_path({"k": None}, "k")
        assert result is None
        assert result is not NOT_FOUND

    def test_containers_returned_as_is(self):
        """Objects and arrays come back unconverted."""
        data = {"address": {"city": "Oslo"}, "tags": ["a"]}
        assert resolve_path(data, "address") == {"city": "Oslo"}
        assert resolve_path(data, "tags") == ["a"]

    def test_does_not_mutate_data(self):
        """Resolution leaves the document untouched."""
        data = {"a": {"b": [1, 2]}}
        resolve_path(data, "a.b.1")
        resolve_path(data, "a.x.y")
        assert data == {"a": {"b": [1, 2]}}


class TestNotFound:
    """Test the NOT_FOUND marker."""

    def test_is_falsy(self):
        assert not NOT_FOUND

    def test_is_missing(self):
        """NOT_FOUND and None are missing; falsy values are not."""
        assert is_missing(NOT_FOUND)
        assert is_missing(None)
        assert not is_missing("")
        assert not is_missing(0)
        assert not is_missing(False)
