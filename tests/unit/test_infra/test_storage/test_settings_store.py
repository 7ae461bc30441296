"""Unit tests for the key-value settings stores."""

from __future__ import annotations

import json
import threading

import pytest

from hydration_service.core.exceptions import StorageException
from hydration_service.infra.storage import InMemorySettingsStore, JsonFileSettingsStore


@pytest.fixture(params=["memory", "json"])
def store(request, tmp_path):
    if request.param == "memory":
        return InMemorySettingsStore()
    return JsonFileSettingsStore(tmp_path / "state.json")


@pytest.mark.unit
class TestSettingsStoreContract:
    """Behaviour shared by every store."""

    def test_get_missing_returns_default(self, store):
        assert store.get("reminderInterval") is None
        assert store.get("reminderInterval", 60) == 60

    def test_set_then_get(self, store):
        store.set("reminderInterval", 45)
        store.set("doNotDisturbStart", "23:00")

        assert store.get("reminderInterval") == 45
        assert store.as_dict() == {"reminderInterval": 45, "doNotDisturbStart": "23:00"}

    def test_delete(self, store):
        store.set("nextReminderDate", "2024-01-02T07:30:00")

        store.delete("nextReminderDate")
        store.delete("nextReminderDate")  # missing keys are ignored

        assert store.get("nextReminderDate") is None

    def test_as_dict_is_a_copy(self, store):
        store.set("totalWaterIntake", 100)

        snapshot = store.as_dict()
        snapshot["totalWaterIntake"] = 999

        assert store.get("totalWaterIntake") == 100


@pytest.mark.unit
class TestJsonFileSettingsStore:
    """File-specific behaviour."""

    def test_values_survive_new_instance(self, json_store):
        json_store.set("totalWaterIntake", 750)

        reopened = JsonFileSettingsStore(json_store.path)

        assert reopened.get("totalWaterIntake") == 750

    def test_creates_parent_directories(self, json_store):
        json_store.set("reminderInterval", 30)

        assert json_store.path.exists()
        assert json.loads(json_store.path.read_text()) == {"reminderInterval": 30}

    def test_write_leaves_no_temp_file(self, json_store):
        json_store.set("reminderInterval", 30)

        assert [p.name for p in json_store.path.parent.iterdir()] == ["state.json"]

    def test_empty_file_is_empty_store(self, tmp_path):
        path = tmp_path / "state.json"
        path.write_text("")

        assert JsonFileSettingsStore(path).as_dict() == {}

    def test_invalid_json_raises_storage_error(self, tmp_path):
        path = tmp_path / "state.json"
        path.write_text("{not json")

        with pytest.raises(StorageException) as exc_info:
            JsonFileSettingsStore(path).get("reminderInterval")

        assert str(path) in exc_info.value.detail
        assert exc_info.value.extra["path"] == str(path)

    def test_non_object_json_raises_storage_error(self, tmp_path):
        path = tmp_path / "state.json"
        path.write_text("[1, 2, 3]")

        with pytest.raises(StorageException):
            JsonFileSettingsStore(path).as_dict()

    def test_unserializable_value_raises_and_keeps_file(self, json_store):
        json_store.set("reminderInterval", 30)

        with pytest.raises(StorageException):
            json_store.set("bad", object())

        assert json_store.as_dict() == {"reminderInterval": 30}

    def test_reads_see_external_changes(self, json_store):
        json_store.set("reminderInterval", 30)
        json_store.path.write_text(json.dumps({"reminderInterval": 90}))

        assert json_store.get("reminderInterval") == 90

    def test_writes_from_two_instances_are_merged(self, json_store):
        other = JsonFileSettingsStore(json_store.path)
        json_store.set("nextReminderDate", "2024-01-01T11:00:00")
        other.set("totalWaterIntake", 250)

        json_store.set("nextReminderDate", "2024-01-01T12:00:00")

        assert JsonFileSettingsStore(json_store.path).as_dict() == {
            "nextReminderDate": "2024-01-01T12:00:00",
            "totalWaterIntake": 250,
        }

    def test_delete_keeps_values_from_other_instance(self, json_store):
        other = JsonFileSettingsStore(json_store.path)
        json_store.set("nextReminderDate", "2024-01-01T11:00:00")
        other.set("totalWaterIntake", 250)

        json_store.delete("nextReminderDate")

        assert other.as_dict() == {"totalWaterIntake": 250}

    def test_concurrent_writes_are_all_kept(self, json_store):
        def writer(n: int) -> None:
            json_store.set(f"key{n}", n)

        threads = [threading.Thread(target=writer, args=(n,)) for n in range(20)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        on_disk = json.loads(json_store.path.read_text())
        assert on_disk == {f"key{n}": n for n in range(20)}
