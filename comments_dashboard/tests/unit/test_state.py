"""
Unit tests for the table state persistence.
"""

import json
import threading

import pytest

from comments_dashboard.models import TableViewState
from comments_dashboard.state import JsonFileStore, MemoryStore, ViewStateRepository


class TestViewStateRepository:
    """Test cases for ViewStateRepository."""

    def test_empty_store_gives_defaults(self):
        state = ViewStateRepository(MemoryStore()).load()
        assert state == TableViewState(
            search_text="",
            sort_key="",
            sort_ascending=True,
            current_page=1,
            items_per_page=10
        )

    def test_partial_store_is_valid(self):
        state = ViewStateRepository(MemoryStore({"search": "lorem"})).load()
        assert state == TableViewState(search_text="lorem")

    def test_save_writes_stringified_values(self):
        store = MemoryStore()
        state = TableViewState(
            search_text="abc",
            sort_key="email",
            sort_ascending=False,
            current_page=3,
            items_per_page=50
        )

        ViewStateRepository(store).save(state)

        assert store.as_dict() == {
            "search": "abc",
            "sortKey": "email",
            "sortAsc": "false",
            "currentPage": "3",
            "itemsPerPage": "50",
        }

    @pytest.mark.parametrize("raw, expected", [
        ("false", False),
        ("true", True),
        ("False", True),
        ("", True),
        ("garbage", True),
    ])
    def test_sort_direction_is_descending_only_for_false(self, raw, expected):
        state = ViewStateRepository(MemoryStore({"sortAsc": raw})).load()
        assert state.sort_ascending is expected

    @pytest.mark.parametrize("raw, expected", [
        ("4", 4),
        ("4.0", 4),
        ("0", 1),
        ("-3", 1),
        ("abc", 1),
        ("", 1),
        ("nan", 1),
    ])
    def test_current_page_parsing(self, raw, expected):
        state = ViewStateRepository(MemoryStore({"currentPage": raw})).load()
        assert state.current_page == expected

    @pytest.mark.parametrize("raw, expected", [
        ("20", 20),
        ("5", 5),
        ("7", 10),
        ("0", 10),
        ("lots", 10),
    ])
    def test_items_per_page_parsing(self, raw, expected):
        state = ViewStateRepository(MemoryStore({"itemsPerPage": raw})).load()
        assert state.items_per_page == expected

    def test_unknown_sort_key_discarded(self):
        state = ViewStateRepository(MemoryStore({"sortKey": "comment"})).load()
        assert state.sort_key == ""

    def test_custom_default_page_size(self):
        state = ViewStateRepository(MemoryStore(), default_page_size=20).load()
        assert state.items_per_page == 20

    def test_invalid_default_page_size_rejected(self):
        with pytest.raises(ValueError):
            ViewStateRepository(MemoryStore(), default_page_size=15)


class TestJsonFileStore:
    """Test cases for JsonFileStore."""

    def test_values_survive_reopen(self, tmp_path):
        path = tmp_path / "nested" / "state.json"
        store = JsonFileStore(str(path))
        store.set("search", "hello")

        reopened = JsonFileStore(str(path))

        assert reopened.get("search") == "hello"
        assert reopened.get("sortKey") is None
        assert json.loads(path.read_text(encoding="utf-8")) == {"search": "hello"}

    def test_reload_restores_saved_configuration(self, tmp_path):
        path = str(tmp_path / "state.json")
        saved = TableViewState(sort_key="name", sort_ascending=False, items_per_page=20)
        ViewStateRepository(JsonFileStore(path)).save(saved)

        restored = ViewStateRepository(JsonFileStore(path)).load()

        assert restored == saved

    def test_corrupt_file_reads_as_empty(self, tmp_path):
        path = tmp_path / "state.json"
        path.write_text("{not json", encoding="utf-8")

        store = JsonFileStore(str(path))

        assert store.get("search") is None
        assert ViewStateRepository(store).load() == TableViewState()

    def test_non_object_file_reads_as_empty(self, tmp_path):
        path = tmp_path / "state.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")

        assert JsonFileStore(str(path)).get("search") is None

    def test_concurrent_saves_from_shared_store(self, tmp_path):
        """Sessions share one cached store, so saves may race across threads."""
        path = tmp_path / "state.json"
        repository = ViewStateRepository(JsonFileStore(str(path)))
        errors = []

        def save_many(worker):
            try:
                for page in range(1, 151):
                    repository.save(TableViewState(search_text=f"w{worker}", current_page=page))
            except Exception as e:
                errors.append(e)

        threads = [threading.Thread(target=save_many, args=(i,)) for i in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert errors == []
        saved = json.loads(path.read_text(encoding="utf-8"))
        assert saved["currentPage"] == "150"
        assert list(tmp_path.glob("*.tmp")) == []
