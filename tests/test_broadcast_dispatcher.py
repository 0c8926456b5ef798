"""Unit tests for BroadcastDispatcher."""

from __future__ import annotations

import unittest
from unittest.mock import AsyncMock, patch

from fakes import FakeTransportFactory, paired_store

from app.core.errors import InitializationError, SessionNotReady, TransportError
from app.providers.storage.memory_store import MemorySessionStore
from app.services.broadcast_dispatcher import BroadcastDispatcher, DispatchOutcome, summarize_outcomes
from app.services.session_manager import SessionManager


class BroadcastDispatcherTestCase(unittest.IsolatedAsyncioTestCase):
    """Covers ordering, failure isolation, readiness and one-shot teardown."""

    def _build(self, **transport_kwargs) -> tuple[BroadcastDispatcher, SessionManager, FakeTransportFactory]:
        factory = FakeTransportFactory(**transport_kwargs)
        manager = SessionManager(paired_store(), factory)
        return BroadcastDispatcher(manager), manager, factory

    def _sends(self, factory: FakeTransportFactory) -> list[str]:
        return [call[1] for call in factory.last.calls if isinstance(call, tuple) and call[0] == "send_text"]

    async def test_one_failing_recipient_does_not_stop_the_rest(self) -> None:
        dispatcher, _, factory = self._build(fail_for={"222"})

        outcomes = await dispatcher.dispatch("hello", ["111", "222", "333"])

        self.assertEqual(self._sends(factory), ["111", "222", "333"])
        self.assertEqual([outcome.recipient for outcome in outcomes], ["111", "222", "333"])
        self.assertEqual([outcome.success for outcome in outcomes], [True, False, True])
        self.assertIsNone(outcomes[0].error)
        self.assertIn("222", outcomes[1].error)
        self.assertEqual(factory.last.sent, [("111", "hello"), ("333", "hello")])

    async def test_first_recipient_failure_still_sends_to_others(self) -> None:
        dispatcher, _, factory = self._build(fail_for={"111"})

        outcomes = await dispatcher.dispatch("hello", ["111", "222", "333", "444"])

        self.assertEqual(len(self._sends(factory)), 4)
        self.assertEqual(sum(outcome.success for outcome in outcomes), 3)

    async def test_empty_recipient_list_sends_nothing(self) -> None:
        dispatcher, _, factory = self._build()

        outcomes = await dispatcher.dispatch("hello", [])

        self.assertEqual(outcomes, [])
        self.assertEqual(self._sends(factory), [])

    async def test_duplicates_are_sent_twice_in_order(self) -> None:
        dispatcher, _, factory = self._build()

        await dispatcher.dispatch("hi", ["111", "222", "111"])

        self.assertEqual(self._sends(factory), ["111", "222", "111"])

    async def test_session_not_live_aborts_before_any_send(self) -> None:
        factory = FakeTransportFactory()
        manager = SessionManager(MemorySessionStore(), factory)
        dispatcher = BroadcastDispatcher(manager)

        with self.assertRaises(SessionNotReady):
            await dispatcher.dispatch("hello", ["111", "222"])

        self.assertEqual(self._sends(factory), [])

    async def test_initialization_error_propagates(self) -> None:
        dispatcher, _, factory = self._build(connect_error=TransportError("refused"))

        with self.assertRaises(InitializationError):
            await dispatcher.dispatch("hello", ["111"])

        self.assertEqual(self._sends(factory), [])

    async def test_disconnect_after_clears_cached_initialization_error(self) -> None:
        dispatcher, manager, factory = self._build(connect_error=TransportError("refused"))

        with self.assertRaises(InitializationError):
            await dispatcher.dispatch("hello", ["111"], disconnect_after=True)

        factory.transport_kwargs = {}
        outcomes = await dispatcher.dispatch("hello", ["111"])

        self.assertEqual(len(factory.created), 2)
        self.assertTrue(outcomes[0].success)

    async def test_disconnect_after_tears_session_down(self) -> None:
        dispatcher, manager, factory = self._build(fail_for={"222"})

        outcomes = await dispatcher.dispatch("hello", ["111", "222"], disconnect_after=True)

        self.assertEqual(len(outcomes), 2)
        self.assertEqual(factory.last.calls[-1], "disconnect")
        self.assertIsNone(manager.current_session)

    async def test_session_is_kept_by_default(self) -> None:
        dispatcher, manager, factory = self._build()

        await dispatcher.dispatch("hello", ["111"])

        self.assertNotIn("disconnect", factory.last.calls)
        self.assertIsNotNone(manager.current_session)

    async def test_send_delay_applies_between_sends_only(self) -> None:
        factory = FakeTransportFactory()
        manager = SessionManager(paired_store(), factory)
        dispatcher = BroadcastDispatcher(manager, send_delay_seconds=0.5)
        # Connect first; the fake transport's connect also sleeps.
        await manager.acquire_session()

        with patch("app.services.broadcast_dispatcher.asyncio.sleep", new=AsyncMock()) as sleep:
            await dispatcher.dispatch("hello", ["111", "222", "333"])

        self.assertEqual(sleep.await_count, 2)
        sleep.assert_awaited_with(0.5)


class SummarizeOutcomesTestCase(unittest.TestCase):
    def test_counts_and_details(self) -> None:
        summary = summarize_outcomes(
            [
                DispatchOutcome(recipient="111", success=True),
                DispatchOutcome(recipient="222", success=False, error="boom"),
            ]
        )

        self.assertEqual(summary["sent"], 1)
        self.assertEqual(summary["failed"], 1)
        self.assertEqual(summary["outcomes"][1], {"recipient": "222", "success": False, "error": "boom"})


if __name__ == "__main__":
    unittest.main()
