# -*- coding: utf-8 -*-
"""
Tests for the persistence layer.

Tests cover:
- In-memory and SQLite key-value stores
- JSON collection repositories (upsert, lookups, delete)
- Local database backup export / import
- Draft repository
"""

import json
import re

import pytest

from repositories.collection_repository import (
    ProjectRepository,
    RaciMatrixRepository,
    TemplateRepository,
)
from repositories.draft_repository import DraftRepository
from repositories.key_value_store import InMemoryStore, KeyValueStore, SQLiteKeyValueStore
from repositories.local_database import LocalDatabase
from services.exceptions import StorageException


@pytest.fixture
def sqlite_store(tmp_path):
    store = SQLiteKeyValueStore(tmp_path / "data" / "store.db")
    yield store
    store.close()


@pytest.fixture
def projects(store, clock):
    return ProjectRepository(store, clock=clock)


class TestKeyValueStores:
    """Test both store implementations behave the same."""

    @pytest.mark.parametrize("store_name", ["store", "sqlite_store"])
    def test_get_set_remove(self, request, store_name):
        kv = request.getfixturevalue(store_name)

        assert kv.get("missing") is None
        kv.set("a", "1")
        kv.set("a", "2")
        assert kv.get("a") == "2"
        assert "a" in kv

        kv.remove("a")
        kv.remove("a")
        assert kv.get("a") is None

    @pytest.mark.parametrize("store_name", ["store", "sqlite_store"])
    def test_keys_by_prefix(self, request, store_name):
        kv = request.getfixturevalue(store_name)
        for key in ("bep_draft:2", "bep_draft:1", "bailey_projects"):
            kv.set(key, "x")

        assert kv.keys("bep_draft:") == ["bep_draft:1", "bep_draft:2"]

    def test_sqlite_persists_across_connections(self, tmp_path):
        path = tmp_path / "store.db"
        first = SQLiteKeyValueStore(path)
        first.set("wfm_access_token", "token-1")
        first.close()

        second = SQLiteKeyValueStore(path)
        assert second.get("wfm_access_token") == "token-1"
        second.close()

    def test_sqlite_creates_parent_directory(self, sqlite_store):
        assert sqlite_store.db_path.parent.exists()

    def test_in_memory_initial_values(self):
        kv = InMemoryStore({"k": "v"})

        assert kv.get("k") == "v"
        assert len(kv) == 1


class TestCollectionRepository:
    """Test JSON collection upsert semantics."""

    def test_initialize_creates_empty_array(self, projects, store):
        projects.initialize()

        assert store.get("bailey_projects") == "[]"
        assert projects.get_all() == []

    def test_initialize_keeps_existing_data(self, projects, store):
        store.set("bailey_projects", '[{"id": "a"}]')
        projects.initialize()

        assert projects.get_all() == [{"id": "a"}]

    def test_save_new_assigns_id_and_timestamps(self, projects):
        saved = projects.save({"projectName": "Riverside"})

        assert re.fullmatch(r"bp_\d+_[0-9a-z]{9}", saved["id"])
        assert saved["createdAt"] == saved["updatedAt"]
        assert projects.get(saved["id"]) == saved

    def test_save_new_keeps_given_id(self, projects):
        saved = projects.save({"id": "bp_fixed", "projectName": "Riverside"})

        assert saved["id"] == "bp_fixed"
        assert [p["id"] for p in projects.get_all()] == ["bp_fixed"]

    def test_save_existing_merges(self, projects):
        created = projects.save({"id": "p1", "projectName": "Riverside", "clientName": "Acme"})
        updated = projects.save({"id": "p1", "projectName": "Riverside Library"})

        assert updated["projectName"] == "Riverside Library"
        assert updated["clientName"] == "Acme"
        assert updated["createdAt"] == created["createdAt"]
        assert updated["updatedAt"] > created["updatedAt"]
        assert len(projects.get_all()) == 1

    def test_insertion_order(self, projects):
        for name in ("A", "B", "C"):
            projects.save({"id": name})

        assert [p["id"] for p in projects.get_all()] == ["A", "B", "C"]

    def test_get_by_iso_number(self, projects):
        projects.save({"id": "p1", "isoNumber": "BP2501"})
        projects.save({"id": "p2", "isoNumber": "BP2502"})

        assert projects.get_by_iso_number("BP2502")["id"] == "p2"
        assert projects.get_by_iso_number("BP9999") is None

    def test_delete(self, projects):
        projects.save({"id": "p1"})
        projects.save({"id": "p2"})

        assert projects.delete("p1") is True
        assert projects.delete("p1") is False
        assert [p["id"] for p in projects.get_all()] == ["p2"]

    def test_raci_by_project(self, store, clock):
        matrices = RaciMatrixRepository(store, clock=clock)
        matrices.save({"id": "m1", "projectId": "p1"})
        matrices.save({"id": "m2", "projectId": "p2"})
        matrices.save({"id": "m3", "projectId": "p1"})

        assert [m["id"] for m in matrices.get_by_project("p1")] == ["m1", "m3"]

    def test_templates_use_own_key(self, store, clock):
        TemplateRepository(store, clock=clock).save({"id": "t1"})

        assert json.loads(store.get("bailey_templates"))[0]["id"] == "t1"
        assert store.get("bailey_projects") is None

    def test_malformed_json_raises(self, projects, store):
        store.set("bailey_projects", "{broken")

        with pytest.raises(StorageException) as exc_info:
            projects.get_all()
        assert exc_info.value.key == "bailey_projects"

    def test_non_array_raises(self, projects, store):
        store.set("bailey_projects", '{"id": "p1"}')

        with pytest.raises(StorageException):
            projects.get_all()

    def test_injected_id_factory(self, store, clock):
        repo = ProjectRepository(store, clock=clock, id_factory=lambda: "bp_test")

        assert repo.save({})["id"] == "bp_test"


class TestLocalDatabase:
    """Test backup export and import."""

    @pytest.fixture
    def database(self, store, clock):
        db = LocalDatabase(store, clock=clock)
        db.initialize()
        return db

    def test_initialize_creates_all_collections(self, database, store):
        for key in ("bailey_projects", "bailey_templates", "bailey_raci_matrices"):
            assert store.get(key) == "[]"

    def test_export_data(self, database):
        database.projects.save({"id": "p1"})
        database.raci_matrices.save({"id": "m1", "projectId": "p1"})

        data = database.export_data()

        assert set(data) == {"projects", "templates", "raciMatrices", "exportedAt"}
        assert [p["id"] for p in data["projects"]] == ["p1"]
        assert data["templates"] == []
        assert data["raciMatrices"][0]["projectId"] == "p1"

    def test_import_overwrites_only_present_collections(self, database):
        database.projects.save({"id": "old"})
        database.templates.save({"id": "keep"})

        database.import_data({"projects": [{"id": "new"}]})

        assert [p["id"] for p in database.projects.get_all()] == ["new"]
        assert [t["id"] for t in database.templates.get_all()] == ["keep"]

    def test_export_import_between_stores(self, database, clock):
        database.projects.save({"id": "p1", "projectName": "Riverside"})
        target = LocalDatabase(InMemoryStore(), clock=clock)

        target.import_data(database.export_data())

        assert target.projects.get("p1")["projectName"] == "Riverside"


class TestDraftRepository:
    """Test draft snapshots."""

    def test_save_load_delete(self, store, empty_bep):
        drafts = DraftRepository(store)

        assert drafts.save(empty_bep) == empty_bep.id
        assert drafts.load(empty_bep.id) == empty_bep
        assert drafts.list_ids() == [empty_bep.id]

        drafts.delete(empty_bep.id)
        assert drafts.load(empty_bep.id) is None

    def test_malformed_draft_raises(self, store):
        store.set("bep_draft:x", "not json")

        with pytest.raises(StorageException):
            DraftRepository(store).load("x")


class TestStoreInterface:
    """Test the store contract."""

    def test_store_without_keys_cannot_be_created(self):
        class PartialStore(KeyValueStore):
            def get(self, key):
                return None

            def set(self, key, value):
                pass

            def remove(self, key):
                pass

        with pytest.raises(TypeError):
            PartialStore()
