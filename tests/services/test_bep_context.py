# -*- coding: utf-8 -*-
"""
Tests for the BEP context.

Tests cover:
- Dispatch and change notification
- Draft save / load through the draft repository
- Reset and dict round trip
- A full wizard session from project selection to export
"""

import json

import pytest

from models import Project, ProjectParty, PartyRole, ProjectStage, ProjectType
from models.defaults import create_default_element, create_role, create_software_item, create_milestone
from repositories.draft_repository import DraftRepository
from services.export import ExportManager, deserialize_json
from services.wizard import actions
from services.wizard.bep_context import BepContext
from services.wizard.completion import SectionStatus, completion_percentage, evaluate_sections
from services.wizard.step_navigator import StepNavigator


@pytest.fixture
def drafts(store):
    return DraftRepository(store)


@pytest.fixture
def context(empty_bep, ids, clock, drafts):
    return BepContext(document=empty_bep, id_generator=ids, clock=clock, draft_repository=drafts)


class TestDispatch:
    """Test dispatching actions."""

    def test_dispatch_replaces_document(self, context, empty_bep):
        doc = context.dispatch(actions.update_cde({"platform": "ACC"}))

        assert context.document is doc
        assert doc.cde_configuration.platform == "ACC"
        assert empty_bep.cde_configuration.platform == ""

    def test_subscribers_receive_old_and_new(self, context, empty_bep):
        received = []
        context.subscribe(lambda old, new, action: received.append((old, new, action.type)))

        new = context.dispatch(actions.set_step(3))

        assert received == [(empty_bep, new, actions.ActionType.SET_STEP)]

    def test_noop_does_not_notify(self, context):
        received = []
        context.subscribe(lambda *args: received.append(args))

        context.dispatch(actions.remove_party("missing"))

        assert received == []

    def test_unsubscribe(self, context):
        received = []
        unsubscribe = context.subscribe(lambda *args: received.append(args))
        unsubscribe()

        context.dispatch(actions.set_step(2))

        assert received == []

    def test_failing_subscriber_does_not_break_dispatch(self, context):
        received = []

        def broken(*args):
            raise RuntimeError("listener bug")

        context.subscribe(broken)
        context.subscribe(lambda *args: received.append(args))

        context.dispatch(actions.set_step(2))

        assert context.current_step == 2
        assert len(received) == 1

    def test_mark_step_completed(self, context):
        context.mark_step_completed(4)

        assert context.is_step_completed(4)

    def test_default_document_is_empty_bep(self, ids, clock):
        context = BepContext(id_generator=ids, clock=clock)

        assert context.document.id == "id-1"
        assert context.current_step == 1

    def test_reset_creates_new_document(self, context, empty_bep):
        context.dispatch(actions.update_project_info({"project_name": "Riverside"}))
        context.reset()

        assert context.document.id != empty_bep.id
        assert context.document.project_information.project_name == ""


class TestDrafts:
    """Test draft persistence."""

    def test_save_and_load(self, context, store, empty_bep, ids, clock, drafts):
        context.dispatch(actions.update_project_info({"project_name": "Riverside"}))
        saved_id = context.save_draft()

        assert saved_id == empty_bep.id
        assert store.get(f"bep_draft:{saved_id}") is not None

        other = BepContext(id_generator=ids, clock=clock, draft_repository=drafts)
        assert other.load_draft(saved_id) is True
        assert other.document == context.document

    def test_load_missing_draft(self, context):
        assert context.load_draft("nope") is False

    def test_without_repository(self, empty_bep):
        context = BepContext(document=empty_bep)

        with pytest.raises(RuntimeError):
            context.save_draft()
        with pytest.raises(RuntimeError):
            context.load_draft("x")

    def test_dict_round_trip(self, context, ids, clock):
        context.dispatch(actions.add_party(ProjectParty(id="p1", organisation_name="Acme")))

        restored = BepContext.from_dict(context.to_dict(), id_generator=ids, clock=clock)

        assert restored.document == context.document


class TestWizardSession:
    """Test a complete session from project selection to export."""

    def test_end_to_end(self, context, ids, tmp_path):
        navigator = StepNavigator(context)
        project = Project(id="bp_1", name="Riverside Library", number="BP-2025-001",
                          client="Acme Estates", type=ProjectType.NEW_BUILD,
                          stage=ProjectStage.CONCEPT_DESIGN)

        context.dispatch(actions.prepopulate_from_project(project))
        navigator.next_step()

        context.dispatch(actions.add_party(ProjectParty(id=ids.new_id(), organisation_name="Acme Estates",
                                                        role=PartyRole.APPOINTING_PARTY)))
        context.dispatch(actions.add_party(ProjectParty(id=ids.new_id(), organisation_name="Bailey",
                                                        role=PartyRole.LEAD_APPOINTED_PARTY)))
        navigator.next_step()

        context.dispatch(actions.update_eir({"information_standard": "BS EN ISO 19650-2"}))
        navigator.next_step()

        for name in ("Walls", "Floors", "Roofs", "Doors", "Windows"):
            context.dispatch(actions.add_loin_element(create_default_element(name, ids)))
        navigator.next_step()

        context.dispatch(actions.update_cde({"platform": "ACC"}))
        navigator.next_step()

        context.dispatch(actions.update_standards({"classification_system": "uniclass-2015"}))
        navigator.next_step()

        context.dispatch(actions.add_authoring_software(create_software_item("Revit", id_generator=ids)))
        navigator.next_step()

        context.dispatch(actions.add_milestone(create_milestone(ids)))
        navigator.next_step()

        context.dispatch(actions.add_role(create_role("Project Manager", ids)))
        navigator.next_step()

        assert context.current_step == 10
        assert context.completed_steps == list(range(1, 10))
        assert completion_percentage(context.document) == 100
        assert evaluate_sections(context.document)[-1].status == SectionStatus.COMPLETE

        navigator.next_step()
        assert context.is_step_completed(10)

        manager = ExportManager()
        json_path = manager.export_to_directory(context.document, tmp_path, "json")
        html_path = manager.export_to_directory(context.document, tmp_path, "html")

        assert json_path.name == "BEP-BP-2025-001-v0.1.json"
        assert json.loads(json_path.read_text(encoding="utf-8"))["completedSteps"] == list(range(1, 11))
        assert deserialize_json(json_path.read_text(encoding="utf-8")) == context.document
        assert "Riverside Library" in html_path.read_text(encoding="utf-8")
