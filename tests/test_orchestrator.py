# ===============================================
# tests/test_orchestrator.py
# Single-flight request lifecycle against a fake service.
# ===============================================
import threading

import pytest

from src.session import (
    AttachmentStaging,
    GenerationServiceFailure,
    RequestInFlightRejected,
    RequestOrchestrator,
    RequestPhase,
)
from src.session.orchestrator import FAILURE_MESSAGE

from tests.conftest import FakeService, make_file


def make(view, service, files=()):
    staging = AttachmentStaging()
    staging.add(files)
    return RequestOrchestrator(view, staging, service), staging


def test_scenario_a_category_success(view, service):
    orch, staging = make(view, service, [make_file("a.json")])
    outcome = orch.submit("responsive navbar")

    assert outcome.status == "succeeded"
    assert len(service.calls) == 1
    sent = service.calls[0]
    assert "navbar" in sent.final_prompt
    assert "Include: PropertyControls" in sent.final_prompt
    assert [a.name for a in sent.attachments] == ["a.json"]

    code_msgs = [m for m in view.bot_messages if m.code is not None]
    assert code_msgs[-1].code == "X"
    assert code_msgs[-1].copyable
    assert staging.list() == ()
    assert view.file_lists[-1] == ()
    assert orch.state.phase is RequestPhase.IDLE
    assert orch.last_state.phase is RequestPhase.SUCCEEDED
    assert orch.last_state.code == "X"


def test_scenario_b_help_is_instant(view, service):
    orch, _ = make(view, service)
    outcome = orch.submit("help")

    assert outcome.status == "instant"
    assert service.calls == []
    assert orch.state.phase is RequestPhase.IDLE
    assert orch.last_state.phase is RequestPhase.IDLE
    assert [m.kind for m in view.bot_messages] == ["info", "hint"]
    assert ("busy", True) not in view.events


def test_scenario_c_failure_keeps_files(view):
    service = FakeService(failure=GenerationServiceFailure("status", "HTTP 500 secret-token"))
    orch, staging = make(view, service, [make_file("a.json")])
    outcome = orch.submit("pricing table")

    assert outcome.status == "failed"
    assert outcome.error_kind == "status"
    assert view.bot_messages[-1].text == FAILURE_MESSAGE
    assert all("secret-token" not in m.text for m in view.bot_messages)
    assert staging.names() == ["a.json"]
    assert orch.state.phase is RequestPhase.IDLE
    assert orch.last_state.phase is RequestPhase.FAILED
    assert orch.last_state.error_kind == "status"


def test_busy_is_restored_after_success_and_failure(view):
    for service in (FakeService(), FakeService(failure=GenerationServiceFailure("transport"))):
        orch, _ = make(view, service)
        orch.submit("card")
        busy = [e for e in view.events if e[0] == "busy"]
        assert busy[-2:] == [("busy", True), ("busy", False)]
        assert view.busy is False


def test_unexpected_error_renders_generic_failure(view):
    class Boom:
        def generate(self, request):
            raise ConnectionResetError("socket closed")

    orch, staging = make(view, Boom(), [make_file("a.json")])
    outcome = orch.submit("card")

    assert outcome.status == "failed"
    assert outcome.error_kind == "unexpected"
    errors = [m for m in view.bot_messages if m.kind == "error"]
    assert [m.text for m in errors] == [FAILURE_MESSAGE]
    assert all("socket closed" not in m.text for m in view.bot_messages)
    assert view.busy is False
    assert orch.state.phase is RequestPhase.IDLE
    assert orch.last_state.error_kind == "unexpected"
    assert staging.names() == ["a.json"]


@pytest.mark.parametrize("text", ["", "    "])
def test_blank_query_is_silent_noop(view, service, text):
    orch, _ = make(view, service)
    outcome = orch.submit(text)
    assert outcome.status == "empty"
    assert service.calls == []
    assert view.events == []


def test_uncertain_query_passes_through(view, service):
    orch, _ = make(view, service)
    orch.submit("  make it pop  ")
    assert service.calls[0].final_prompt == "make it pop"
    assert view.user_messages == ["make it pop"]


def test_view_sequence_on_submit(view, service):
    view.query = "navbar"
    orch, _ = make(view, service)
    orch.submit("navbar")
    kinds = [e[0] for e in view.events]
    assert kinds[:3] == ["analyzing", "busy", "user"]
    assert view.query == ""


def test_second_submit_while_in_flight_is_rejected(view):
    service = FakeService(block=True)
    orch, _ = make(view, service)
    results = []
    worker = threading.Thread(target=lambda: results.append(orch.submit("navbar")))
    worker.start()
    assert service.started.wait(timeout=5)
    assert orch.in_flight

    with pytest.raises(RequestInFlightRejected):
        orch.submit("pricing")
    assert orch.in_flight

    service.release.set()
    worker.join(timeout=5)
    assert len(service.calls) == 1
    assert results[0].status == "succeeded"
    assert orch.state.phase is RequestPhase.IDLE


def test_instant_reply_allowed_while_in_flight(view):
    service = FakeService(block=True)
    orch, _ = make(view, service)
    worker = threading.Thread(target=lambda: orch.submit("navbar"))
    worker.start()
    assert service.started.wait(timeout=5)
    assert orch.submit("help").status == "instant"
    service.release.set()
    worker.join(timeout=5)
    assert len(service.calls) == 1


def test_staging_changes_during_flight_do_not_alter_request(view):
    service = FakeService(block=True)
    orch, staging = make(view, service, [make_file("a.json")])
    worker = threading.Thread(target=lambda: orch.submit("navbar"))
    worker.start()
    assert service.started.wait(timeout=5)
    staging.add([make_file("b.json")])
    service.release.set()
    worker.join(timeout=5)
    assert [a.name for a in service.calls[0].attachments] == ["a.json"]


def test_ready_for_next_submission_after_failure(view):
    service = FakeService(failure=GenerationServiceFailure("malformed"))
    orch, _ = make(view, service)
    assert orch.submit("navbar").status == "failed"
    service.failure = None
    assert orch.submit("navbar").status == "succeeded"
    assert len(service.calls) == 2
