"""Unit tests for the in-memory ride store."""

import threading

import pytest

from rideshare_api.app.core.exceptions import DuplicateRideError, RideNotFoundError
from rideshare_api.app.models.ride import Ride


@pytest.fixture
def record(town_ride_data):
    return Ride(town_ride_data).to_plain_record()


class TestCreateAndGet:
    """Tests for inserting and reading rides."""

    def test_get_returns_created_record(self, store, record):
        returned = store.create_ride(record)
        assert returned == record
        assert store.get_ride(record["id"]) == record

    def test_duplicate_id_is_rejected(self, store, record):
        store.create_ride(record)
        with pytest.raises(DuplicateRideError) as exc_info:
            store.create_ride(record)
        assert exc_info.value.ride_id == record["id"]

    def test_get_unknown_id(self, store):
        with pytest.raises(RideNotFoundError) as exc_info:
            store.get_ride("missing")
        assert exc_info.value.ride_id == "missing"
        assert "missing" in str(exc_info.value)

    def test_get_does_not_match_prefixes(self, store, record):
        store.create_ride(record)
        with pytest.raises(RideNotFoundError):
            store.get_ride(record["id"][:8])

    def test_stored_record_is_isolated_from_caller(self, store, record):
        store.create_ride(record)
        record["contact"]["name"] = "Mallory"
        fetched = store.get_ride(record["id"])
        fetched["availableSeats"] = 99
        assert store.get_ride(record["id"])["contact"]["name"] == "Ann"
        assert store.get_ride(record["id"])["availableSeats"] == 2


class TestList:
    """Tests for listing rides."""

    def test_empty_store(self, store):
        assert store.list_rides() == []
        assert len(store) == 0

    def test_lists_in_insertion_order(self, store, town_ride_data):
        records = [Ride(town_ride_data).to_plain_record() for _ in range(3)]
        for record in records:
            store.create_ride(record)
        assert store.list_rides() == records
        assert len(store) == 3

    def test_clear(self, store, record):
        store.create_ride(record)
        store.clear()
        assert store.list_rides() == []


class TestReplace:
    """Tests for replacing rides."""

    def test_replace_keeps_original_id(self, store, record, town_ride_data):
        store.create_ride(record)
        town_ride_data["availableSeats"] = 5
        replacement = Ride(town_ride_data).to_plain_record()
        assert replacement["id"] != record["id"]

        stored = store.replace_ride(record["id"], replacement)

        assert stored["id"] == record["id"]
        assert stored["availableSeats"] == 5
        assert store.get_ride(record["id"]) == stored
        with pytest.raises(RideNotFoundError):
            store.get_ride(replacement["id"])

    def test_replace_overwrites_whole_record(self, store, record):
        store.create_ride(record)
        store.replace_ride(record["id"], {"id": "other", "availableSeats": 1})
        assert store.get_ride(record["id"]) == {"id": record["id"], "availableSeats": 1}

    def test_replace_unknown_id(self, store, record):
        with pytest.raises(RideNotFoundError):
            store.replace_ride("missing", record)
        assert len(store) == 0


class TestDelete:
    """Tests for deleting rides."""

    def test_delete_returns_last_state(self, store, record):
        store.create_ride(record)
        store.replace_ride(record["id"], {**record, "availableSeats": 0})

        removed = store.delete_ride(record["id"])

        assert removed == {**record, "availableSeats": 0}
        assert record["id"] not in store
        with pytest.raises(RideNotFoundError):
            store.get_ride(record["id"])

    def test_delete_unknown_id(self, store):
        with pytest.raises(RideNotFoundError):
            store.delete_ride("missing")


class TestConcurrency:
    """Tests for concurrent access."""

    def test_concurrent_creates_are_all_kept(self, store, town_ride_data):
        records = [Ride(town_ride_data).to_plain_record() for _ in range(200)]

        def insert(chunk):
            for record in chunk:
                store.create_ride(record)

        threads = [threading.Thread(target=insert, args=(records[i::4],)) for i in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(store) == 200
        assert {r["id"] for r in store.list_rides()} == {r["id"] for r in records}

    def test_replace_and_delete_on_one_id_are_linearized(self, store, record, town_ride_data):
        store.create_ride(record)
        ride_id = record["id"]
        replacements = []
        for seats in range(4):
            town_ride_data["availableSeats"] = seats
            replacements.append(Ride(town_ride_data).to_plain_record())
        expected = [{**r, "id": ride_id} for r in replacements]

        start = threading.Barrier(len(replacements))
        outcomes = []
        outcomes_lock = threading.Lock()

        def replace(replacement):
            start.wait()
            for _ in range(200):
                try:
                    result = store.replace_ride(ride_id, replacement)
                except RideNotFoundError:
                    result = None
                with outcomes_lock:
                    outcomes.append(result)

        def delete():
            start.wait()
            removed = store.delete_ride(ride_id)
            with outcomes_lock:
                outcomes.append(("deleted", removed))

        threads = [threading.Thread(target=replace, args=(r,)) for r in replacements[1:]]
        threads.append(threading.Thread(target=delete))
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        deletions = [o for o in outcomes if isinstance(o, tuple)]
        assert len(deletions) == 1
        assert deletions[0][1] == record or deletions[0][1] in expected
        for outcome in outcomes:
            if outcome is None or isinstance(outcome, tuple):
                continue
            assert outcome in expected
        assert len(store) == 0
        with pytest.raises(RideNotFoundError):
            store.get_ride(ride_id)

    def test_list_sees_whole_records_during_replaces(self, store, town_ride_data):
        records = [Ride(town_ride_data).to_plain_record() for _ in range(5)]
        for record in records:
            store.create_ride(record)
        town_ride_data["contact"] = {"name": "Zoe", "email": "zoe@example.com", "phone": "123"}
        town_ride_data["startTown"] = "X"
        town_ride_data["availableSeats"] = 7
        replacement = Ride(town_ride_data).to_plain_record()
        allowed = {r["id"]: (r, {**replacement, "id": r["id"]}) for r in records}

        done = threading.Event()

        def replace_all():
            for _ in range(100):
                for record in records:
                    store.replace_ride(record["id"], replacement)
                    store.replace_ride(record["id"], record)
            done.set()

        writer = threading.Thread(target=replace_all)
        writer.start()
        snapshots = []
        while not done.is_set():
            snapshots.append(store.list_rides())
        writer.join()
        snapshots.append(store.list_rides())

        for snapshot in snapshots:
            assert [r["id"] for r in snapshot] == [r["id"] for r in records]
            for listed in snapshot:
                assert listed in allowed[listed["id"]]
