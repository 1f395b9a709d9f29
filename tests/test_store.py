"""Tests for the in-memory TaskStore."""

import threading

import pytest

from taskpad.tasks import Task, TaskStore


def texts(store: TaskStore) -> list[str]:
    return [t.text for t in store.list()]


class TestCreate:
    """Tests for TaskStore.create."""

    def test_create_returns_task(self, store):
        task = store.create("Buy milk")
        assert isinstance(task, Task)
        assert task.text == "Buy milk"
        assert store.list() == (task,)

    def test_create_appends(self, store):
        a = store.create("Buy milk")
        b = store.create("Walk dog")
        assert store.list() == (a, b)

    def test_create_grows_by_one(self, store):
        for i in range(5):
            before = len(store)
            store.create(f"task {i}")
            assert len(store) == before + 1

    def test_create_allows_empty_text(self, store):
        task = store.create("")
        assert task.text == ""
        assert len(store) == 1

    def test_create_allows_duplicate_text(self, store):
        a = store.create("same")
        b = store.create("same")
        assert a.id != b.id
        assert texts(store) == ["same", "same"]

    def test_ids_pairwise_distinct(self, store):
        ids = [store.create("x").id for _ in range(500)]
        assert len(set(ids)) == len(ids)

    def test_ids_distinct_across_stores(self, settings):
        first = TaskStore(settings)
        second = TaskStore(settings)
        ids = [first.create("a").id, second.create("b").id, first.create("c").id]
        assert len(set(ids)) == 3

    def test_ids_distinct_after_delete(self, store):
        a = store.create("a")
        store.delete(a.id)
        b = store.create("b")
        assert b.id != a.id

    def test_uuid_strategy(self, mock_context):
        from taskpad.config import TaskpadSettings

        settings = TaskpadSettings(_env_file=None, id_strategy="uuid")
        store = TaskStore(settings)
        ids = {store.create("x").id for _ in range(100)}
        assert len(ids) == 100
        assert all(len(i) == 32 for i in ids)

    def test_custom_issuer(self):
        ids = iter(["a", "b"])
        store = TaskStore(id_issuer=lambda: next(ids))
        assert [store.create("x").id, store.create("y").id] == ["a", "b"]

    def test_duplicate_issued_id_raises(self):
        store = TaskStore(id_issuer=lambda: "same")
        store.create("first")
        with pytest.raises(RuntimeError, match="duplicate id"):
            store.create("second")
        assert texts(store) == ["first"]

    def test_concurrent_creates_keep_ids_unique(self, store):
        def worker():
            for _ in range(200):
                store.create("t")

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        ids = [t.id for t in store.list()]
        assert len(ids) == 800
        assert len(set(ids)) == 800


class TestUpdate:
    """Tests for TaskStore.update."""

    def test_update_changes_text_only(self, store):
        a = store.create("Buy milk")
        assert store.update(a.id, "Buy oat milk") is True
        updated = store.get(a.id)
        assert updated.id == a.id
        assert updated.text == "Buy oat milk"

    def test_update_keeps_position(self, store):
        a = store.create("a")
        b = store.create("b")
        c = store.create("c")
        store.update(b.id, "B")
        assert [t.id for t in store.list()] == [a.id, b.id, c.id]
        assert texts(store) == ["a", "B", "c"]

    def test_update_leaves_others_identical(self, store):
        a = store.create("a")
        b = store.create("b")
        c = store.create("c")
        store.update(b.id, "B")
        snapshot = store.list()
        assert snapshot[0] is a
        assert snapshot[2] is c

    def test_update_to_empty_text(self, store):
        a = store.create("a")
        store.update(a.id, "")
        assert store.get(a.id).text == ""

    def test_update_unknown_id_is_noop(self, store):
        store.create("a")
        before = store.list()
        assert store.update("missing", "x") is False
        assert store.list() == before
        assert store.list() is before

    def test_update_does_not_mutate_old_snapshot(self, store):
        a = store.create("a")
        old = store.list()
        store.update(a.id, "changed")
        assert old[0].text == "a"
        assert store.list() is not old


class TestDelete:
    """Tests for TaskStore.delete."""

    def test_delete_removes_task(self, store):
        a = store.create("a")
        assert store.delete(a.id) is True
        assert store.list() == ()
        assert store.get(a.id) is None

    def test_delete_preserves_order(self, store):
        a = store.create("a")
        b = store.create("b")
        c = store.create("c")
        d = store.create("d")
        store.delete(b.id)
        assert store.list() == (a, c, d)

    def test_delete_unknown_id_is_noop(self, store):
        store.create("a")
        before = store.list()
        assert store.delete("missing") is False
        assert store.list() == before

    def test_delete_is_idempotent(self, store):
        a = store.create("a")
        b = store.create("b")
        store.delete(a.id)
        once = store.list()
        assert store.delete(a.id) is False
        assert store.list() == once == (b,)

    def test_delete_on_empty_store(self, store):
        assert store.delete("1") is False
        assert store.is_empty()


class TestQueries:
    """Tests for list/get/len/iter."""

    def test_list_empty(self, store):
        assert store.list() == ()
        assert store.is_empty()
        assert len(store) == 0

    def test_list_is_immutable(self, store):
        store.create("a")
        snapshot = store.list()
        assert isinstance(snapshot, tuple)
        with pytest.raises(AttributeError):
            snapshot[0].text = "changed"

    def test_iter_in_order(self, store):
        created = [store.create(str(i)) for i in range(3)]
        assert list(store) == created

    def test_get_missing(self, store):
        assert store.get("nope") is None


class TestScenario:
    """The walk-through from buying milk to an unknown-id update."""

    def test_example_sequence(self, store):
        x = store.create("Buy milk")
        assert [(t.id, t.text) for t in store.list()] == [(x.id, "Buy milk")]

        y = store.create("Walk dog")
        assert x.id != y.id
        assert [(t.id, t.text) for t in store.list()] == [
            (x.id, "Buy milk"),
            (y.id, "Walk dog"),
        ]

        store.update(x.id, "Buy oat milk")
        assert [(t.id, t.text) for t in store.list()] == [
            (x.id, "Buy oat milk"),
            (y.id, "Walk dog"),
        ]

        store.delete(y.id)
        assert [(t.id, t.text) for t in store.list()] == [(x.id, "Buy oat milk")]

        store.delete(y.id)
        assert [(t.id, t.text) for t in store.list()] == [(x.id, "Buy oat milk")]

        unknown = "z-does-not-exist"
        store.update(unknown, "x")
        assert [(t.id, t.text) for t in store.list()] == [(x.id, "Buy oat milk")]
