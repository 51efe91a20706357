"""
Tests for StorageManager.

These tests verify loading, saving and the failure modes of the task file.
"""
import json
from unittest.mock import patch

import pytest

from tasklist.exceptions import LoadError, SaveError, StorageError
from tasklist.managers.storage_manager import StorageManager
from tasklist.models.task import Task


class TestLoadTasks:
    """Test StorageManager.load_tasks."""

    def test_missing_file_returns_empty_list(self, storage):
        assert storage.load_tasks() == []

    def test_load_existing_file(self, data_file):
        data_file.parent.mkdir(parents=True)
        data_file.write_text(json.dumps([{"content": "a"}, {"content": "b"}]))

        tasks = StorageManager(data_file).load_tasks()
        assert [task.content for task in tasks] == ["a", "b"]

    def test_record_without_content_raises_load_error(self, data_file):
        data_file.parent.mkdir(parents=True)
        data_file.write_text(json.dumps([{"content": "a"}, {}]))

        with pytest.raises(LoadError):
            StorageManager(data_file).load_tasks()

    def test_extra_keys_are_ignored(self, data_file):
        data_file.parent.mkdir(parents=True)
        data_file.write_text(json.dumps([{"content": "a", "done": True}]))

        assert StorageManager(data_file).load_tasks() == [Task(content="a")]

    @pytest.mark.parametrize(
        "raw",
        [
            "not json",
            '{"content": "a"}',
            '[{"content": 5}]',
            '["a"]',
            "",
        ],
    )
    def test_malformed_file_raises_load_error(self, data_file, raw):
        data_file.parent.mkdir(parents=True)
        data_file.write_text(raw)

        with pytest.raises(LoadError):
            StorageManager(data_file).load_tasks()

    def test_directory_in_place_of_file_raises_load_error(self, temp_dir):
        with pytest.raises(LoadError):
            StorageManager(temp_dir).load_tasks()


class TestSaveTasks:
    """Test StorageManager.save_tasks."""

    def test_save_creates_parent_directory(self, storage, data_file):
        storage.save_tasks([Task(content="a")])
        assert data_file.exists()

    def test_saved_format_is_array_of_records(self, storage, data_file):
        storage.save_tasks([Task(content="a"), Task(content="b\nc")])
        assert json.loads(data_file.read_text(encoding="utf-8")) == [
            {"content": "a"},
            {"content": "b\nc"},
        ]

    def test_save_then_load_preserves_content_and_order(self, storage):
        tasks = [Task(content="buy milk"), Task(), Task(content="ünïcode \"q\"")]
        storage.save_tasks(tasks)
        assert storage.load_tasks() == tasks

    def test_save_empty_list(self, storage, data_file):
        storage.save_tasks([])
        assert json.loads(data_file.read_text()) == []

    def test_save_replaces_previous_contents(self, storage):
        storage.save_tasks([Task(content="old")])
        storage.save_tasks([Task(content="new")])
        assert [task.content for task in storage.load_tasks()] == ["new"]

    def test_save_failure_raises_and_cleans_up(self, storage, data_file):
        with patch("tasklist.managers.storage_manager.os.replace", side_effect=OSError("disk full")):
            with pytest.raises(SaveError) as exc_info:
                storage.save_tasks([Task(content="a")])

        assert "disk full" in str(exc_info.value)
        assert not data_file.exists()
        assert list(data_file.parent.glob(".tmp_tasklist_*")) == []

    def test_unwritable_location_raises_save_error(self, temp_dir):
        blocker = temp_dir / "blocker"
        blocker.write_text("a file, not a directory")

        with pytest.raises(StorageError):
            StorageManager(blocker / "todo.json").save_tasks([Task()])
