"""Tests for the check runner."""

import logging
import threading
from unittest.mock import MagicMock

import pytest

from status_page.exceptions import ProbeFailure, ProbeTimeout
from status_page.monitoring import CheckResult, CheckRunner, CheckStatus, failure_message
from status_page.providers import BaseProvider

from conftest import CrashingProvider, FailingProvider, PassingProvider


class TestFailureMessage:
    """Tests for failure_message."""

    def test_probe_failure_message_is_kept(self):
        assert failure_message(ProbeFailure("disk full")) == "disk full"

    def test_probe_failure_without_message(self):
        assert failure_message(ProbeFailure()) == "Exception"

    def test_unexpected_error_is_generic(self):
        assert failure_message(RuntimeError("boom")) == "Exception"

    def test_probe_timeout_message(self):
        assert failure_message(ProbeTimeout("timed out after 1s")) == "timed out after 1s"


class TestCheckRunner:
    """Tests for CheckRunner.run."""

    def test_no_providers(self):
        assert CheckRunner().run([]) == []

    def test_passing_provider(self):
        results = CheckRunner().run([PassingProvider])

        assert results == [CheckResult(name="passing", message="", status=CheckStatus.OK)]

    def test_failing_provider(self):
        results = CheckRunner().run([FailingProvider])

        assert results == [
            CheckResult(name="failing", message="disk full", status=CheckStatus.ERROR)
        ]

    def test_failures_do_not_stop_later_probes(self):
        results = CheckRunner().run([CrashingProvider, FailingProvider, PassingProvider])

        assert [(r.name, r.status, r.message) for r in results] == [
            ("crashing", CheckStatus.ERROR, "Exception"),
            ("failing", CheckStatus.ERROR, "disk full"),
            ("passing", CheckStatus.OK, ""),
        ]

    def test_results_follow_provider_order(self):
        providers = [PassingProvider, FailingProvider, CrashingProvider]

        results = CheckRunner().run(providers)

        assert [r.name for r in results] == ["passing", "failing", "crashing"]

    def test_constructor_error_is_a_probe_failure(self):
        class BrokenInit(BaseProvider):
            name = "broken"

            def __init__(self, request=None):
                raise ValueError("bad config")

            def check(self):
                pass

        results = CheckRunner().run([BrokenInit, PassingProvider])

        assert results[0].status == CheckStatus.ERROR
        assert results[1].status == CheckStatus.OK

    def test_keyboard_interrupt_propagates(self):
        class Interrupted(BaseProvider):
            name = "interrupted"

            def check(self):
                raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            CheckRunner().run([Interrupted])

    def test_names_override_provider_name(self):
        results = CheckRunner().run(
            [FailingProvider, PassingProvider],
            names={FailingProvider: "disk"},
        )

        assert [r.name for r in results] == ["disk", "passing"]

    def test_probes_get_request(self):
        seen = []

        class RequestProvider(BaseProvider):
            name = "request"

            def check(self):
                seen.append(self.request)

        CheckRunner().run([RequestProvider, RequestProvider], request="ctx")

        assert seen == ["ctx", "ctx"]


class TestErrorCallback:
    """Tests for error callback invocation."""

    def test_called_once_per_failing_probe(self):
        callback = MagicMock()

        CheckRunner(error_callback=callback).run(
            [PassingProvider, FailingProvider, CrashingProvider]
        )

        assert callback.call_count == 2
        errors = [call.args[0] for call in callback.call_args_list]
        assert isinstance(errors[0], ProbeFailure)
        assert str(errors[0]) == "disk full"
        assert isinstance(errors[1], RuntimeError)
        assert str(errors[1]) == "boom"

    def test_not_called_when_all_pass(self):
        callback = MagicMock()

        CheckRunner(error_callback=callback).run([PassingProvider, PassingProvider])

        callback.assert_not_called()

    def test_callback_error_does_not_stop_cycle(self, caplog):
        callback = MagicMock(side_effect=RuntimeError("alerting down"))

        with caplog.at_level(logging.ERROR):
            results = CheckRunner(error_callback=callback).run(
                [FailingProvider, PassingProvider, CrashingProvider]
            )

        assert [r.status for r in results] == [
            CheckStatus.ERROR,
            CheckStatus.OK,
            CheckStatus.ERROR,
        ]
        assert callback.call_count == 2
        assert "Error callback failed for probe 'failing'" in caplog.text


class TestTimeout:
    """Tests for per-probe timeouts."""

    def test_slow_probe_times_out(self):
        release = threading.Event()

        class SlowProvider(BaseProvider):
            name = "slow"

            def check(self):
                release.wait(5)

        try:
            results = CheckRunner(timeout=0.05).run([SlowProvider, PassingProvider])
        finally:
            release.set()

        assert results == [
            CheckResult(name="slow", message="timed out after 0.05s", status=CheckStatus.ERROR),
            CheckResult(name="passing", message="", status=CheckStatus.OK),
        ]

    def test_timeout_is_reported_to_callback(self):
        release = threading.Event()
        callback = MagicMock()

        class SlowProvider(BaseProvider):
            name = "slow"

            def check(self):
                release.wait(5)

        try:
            CheckRunner(error_callback=callback, timeout=0.05).run([SlowProvider])
        finally:
            release.set()

        callback.assert_called_once()
        assert isinstance(callback.call_args.args[0], ProbeTimeout)

    def test_fast_probes_unaffected(self):
        results = CheckRunner(timeout=5).run([PassingProvider, FailingProvider])

        assert [r.status for r in results] == [CheckStatus.OK, CheckStatus.ERROR]
        assert results[1].message == "disk full"

    def test_probe_raising_timeout_error_is_not_reported_as_timeout(self):
        class SocketTimeout(BaseProvider):
            name = "socket"

            def check(self):
                raise TimeoutError("read timed out")

        results = CheckRunner(timeout=5).run([SocketTimeout])

        assert results[0].status == CheckStatus.ERROR
        assert results[0].message == "Exception"

    def test_abandoned_thread_is_daemon(self):
        release = threading.Event()

        class HangingProvider(BaseProvider):
            name = "hanging"

            def check(self):
                release.wait(5)

        try:
            results = CheckRunner(timeout=0.05).run([HangingProvider])
            threads = [t for t in threading.enumerate() if t.name == "status-page-hanging"]

            assert results[0].message == "timed out after 0.05s"
            assert threads
            assert all(t.daemon for t in threads)
        finally:
            release.set()

    def test_timeout_uses_output_name(self):
        release = threading.Event()

        class SlowProvider(BaseProvider):
            name = "slow"

            def check(self):
                release.wait(5)

        try:
            results = CheckRunner(timeout=0.05).run([SlowProvider], names={SlowProvider: "disk"})
        finally:
            release.set()

        assert results[0].name == "disk"
        assert results[0].status == CheckStatus.ERROR
