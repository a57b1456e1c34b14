"""
Tests for services/diagnostic_session.py — generation-guarded publishing.
"""
import threading

from core import Diagnostic, Range
from services.diagnostic_session import DiagnosticSession


def _diag(message: str) -> Diagnostic:
    return Diagnostic(Range.on_line(0, 0, 1), message)


class TestDiagnosticSession:

    def test_starts_empty(self):
        session = DiagnosticSession("doc")
        assert session.diagnostics == ()
        assert session.generation == 0

    def test_publish_current_generation(self):
        session = DiagnosticSession("doc")
        gen = session.begin()
        assert session.publish(gen, [_diag("a")]) is True
        assert session.diagnostics == (_diag("a"),)

    def test_publish_replaces_wholesale(self):
        session = DiagnosticSession("doc")
        session.publish(session.begin(), [_diag("a"), _diag("b")])
        session.publish(session.begin(), [_diag("c")])
        assert session.diagnostics == (_diag("c"),)

    def test_stale_pass_is_dropped(self):
        session = DiagnosticSession("doc")
        slow = session.begin()
        fast = session.begin()
        assert session.publish(fast, [_diag("new")]) is True
        assert session.publish(slow, [_diag("old")]) is False
        assert session.diagnostics == (_diag("new"),)

    def test_clear_invalidates_pass_in_flight(self):
        session = DiagnosticSession("doc")
        gen = session.begin()
        session.publish(gen, [_diag("a")])
        pending = session.begin()
        session.clear()
        assert session.diagnostics == ()
        assert session.publish(pending, [_diag("b")]) is False

    def test_concurrent_passes_leave_one_consistent_set(self):
        session = DiagnosticSession("doc")
        barrier = threading.Barrier(8)

        def worker(n: int):
            gen = session.begin()
            barrier.wait()
            session.publish(gen, [_diag(f"pass {n}"), _diag(f"pass {n}")])

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert session.generation == 8
        messages = {d.message for d in session.diagnostics}
        assert len(messages) <= 1
