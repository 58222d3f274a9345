"""Tests for notification bus subscription and dispatch."""

from __future__ import annotations

import unittest

from switchboard.core.bus import NotificationBus
from switchboard.exceptions import InvalidNameError, SubscriberNotFoundError
from switchboard.patterns.message import Message
from switchboard.patterns.observer import SubscriptionHandle


class Receiver:
    """Records every message it is handed."""

    def __init__(self, label: str, log: list[tuple[str, Message]]) -> None:
        self.label = label
        self.log = log

    def on_message(self, message: Message) -> None:
        self.log.append((self.label, message))


class NotificationBusTests(unittest.TestCase):
    """Validate ordering, removal and fan-out rules."""

    def setUp(self) -> None:
        self.bus = NotificationBus()
        self.log: list[tuple[str, Message]] = []

    def _subscribe(self, name: str, label: str) -> Receiver:
        receiver = Receiver(label, self.log)
        self.bus.subscribe(name, SubscriptionHandle(receiver.on_message, receiver))
        return receiver

    def test_each_subscriber_called_once_in_registration_order(self) -> None:
        for label in ("a", "b", "c", "d"):
            self._subscribe("PING", label)

        self.bus.dispatch(Message("PING", {"count": 1}))

        self.assertEqual([label for label, _ in self.log], ["a", "b", "c", "d"])
        for _, message in self.log:
            self.assertEqual(message.name, "PING")
            self.assertEqual(message.body, {"count": 1})

    def test_dispatch_without_subscribers_is_noop(self) -> None:
        self.bus.dispatch(Message("NOBODY"))
        self.assertEqual(self.log, [])

    def test_dispatch_only_reaches_matching_name(self) -> None:
        self._subscribe("PING", "ping")
        self._subscribe("PONG", "pong")
        self.bus.dispatch(Message("PONG"))
        self.assertEqual([label for label, _ in self.log], ["pong"])

    def test_unsubscribe_removes_first_match_by_identity(self) -> None:
        receiver = self._subscribe("PING", "a")
        other = self._subscribe("PING", "b")

        removed = self.bus.unsubscribe("PING", receiver)

        self.assertTrue(removed)
        self.assertEqual(self.bus.subscriber_count("PING"), 1)
        self.bus.dispatch(Message("PING"))
        self.assertEqual([label for label, _ in self.log], ["b"])
        self.assertTrue(self.bus.unsubscribe("PING", other))

    def test_unsubscribe_disposes_removed_handle(self) -> None:
        receiver = Receiver("a", self.log)
        handle = SubscriptionHandle(receiver.on_message, receiver)
        self.bus.subscribe("PING", handle)
        self.bus.unsubscribe("PING", receiver)
        self.assertTrue(handle.is_disposed)

    def test_unsubscribe_unknown_identity_leaves_list_alone(self) -> None:
        self._subscribe("PING", "a")
        self.assertFalse(self.bus.unsubscribe("PING", object()))
        self.assertEqual(self.bus.subscriber_count("PING"), 1)

    def test_unsubscribe_missing_name_raises(self) -> None:
        with self.assertRaises(SubscriberNotFoundError):
            self.bus.unsubscribe("NEVER", object())

    def test_last_unsubscribe_drops_name(self) -> None:
        receiver = self._subscribe("PING", "a")
        self.bus.unsubscribe("PING", receiver)

        self.assertFalse(self.bus.has_subscribers("PING"))
        self.assertNotIn("PING", self.bus.names())
        self.bus.dispatch(Message("PING"))
        self.assertEqual(self.log, [])

        self._subscribe("PING", "fresh")
        self.bus.dispatch(Message("PING"))
        self.assertEqual([label for label, _ in self.log], ["fresh"])

    def test_duplicate_identity_is_allowed(self) -> None:
        receiver = Receiver("a", self.log)
        self.bus.subscribe("PING", SubscriptionHandle(receiver.on_message, receiver))
        self.bus.subscribe("PING", SubscriptionHandle(receiver.on_message, receiver))
        self.bus.dispatch(Message("PING"))
        self.assertEqual(len(self.log), 2)

        self.bus.unsubscribe("PING", receiver)
        self.assertEqual(self.bus.subscriber_count("PING"), 1)

    def test_callback_is_default_identity(self) -> None:
        seen: list[str] = []

        def on_ping(message: Message) -> None:
            seen.append(message.name)

        self.bus.subscribe("PING", SubscriptionHandle(on_ping))
        self.bus.dispatch(Message("PING"))
        self.assertTrue(self.bus.unsubscribe("PING", on_ping))
        self.assertEqual(seen, ["PING"])

    def test_bound_method_identity_matches_fresh_bound_method(self) -> None:
        receiver = Receiver("a", self.log)
        self.bus.subscribe("PING", SubscriptionHandle(receiver.on_message))
        self.assertTrue(self.bus.unsubscribe("PING", receiver.on_message))

    def test_subscribe_rejects_empty_name(self) -> None:
        with self.assertRaises(InvalidNameError):
            self.bus.subscribe("", SubscriptionHandle(lambda message: None))
        with self.assertRaises(InvalidNameError):
            self.bus.subscribe("   ", SubscriptionHandle(lambda message: None))

    def test_subscribe_rejects_non_handle(self) -> None:
        with self.assertRaises(TypeError):
            self.bus.subscribe("PING", lambda message: None)  # type: ignore[arg-type]

    def test_handler_error_propagates_and_stops_fan_out(self) -> None:
        def explode(message: Message) -> None:
            raise RuntimeError("boom")

        self.bus.subscribe("PING", SubscriptionHandle(explode))
        self._subscribe("PING", "after")

        with self.assertRaises(RuntimeError):
            self.bus.dispatch(Message("PING"))
        self.assertEqual(self.log, [])

    def test_isolated_handler_error_is_logged_and_skipped(self) -> None:
        bus = NotificationBus(isolate_handler_errors=True)
        seen: list[str] = []

        def explode(message: Message) -> None:
            raise RuntimeError("boom")

        bus.subscribe("PING", SubscriptionHandle(explode))
        bus.subscribe("PING", SubscriptionHandle(lambda message: seen.append("after")))

        with self.assertLogs("switchboard.core.bus", level="ERROR") as logs:
            bus.dispatch(Message("PING"))

        self.assertEqual(seen, ["after"])
        self.assertTrue(any("bus.dispatch.handler_failed" in line for line in logs.output))

    def test_nested_dispatch_is_depth_first(self) -> None:
        order: list[str] = []

        def first(message: Message) -> None:
            order.append("first")
            self.bus.dispatch(Message("INNER"))

        self.bus.subscribe("OUTER", SubscriptionHandle(first))
        self.bus.subscribe("OUTER", SubscriptionHandle(lambda m: order.append("second")))
        self.bus.subscribe("INNER", SubscriptionHandle(lambda m: order.append("inner")))

        self.bus.dispatch(Message("OUTER"))

        self.assertEqual(order, ["first", "inner", "second"])

    def test_clear_disposes_everything(self) -> None:
        handle = SubscriptionHandle(lambda message: None)
        self.bus.subscribe("A", handle)
        self.bus.subscribe("B", handle)
        self.bus.clear()
        self.assertEqual(self.bus.names(), [])
        self.assertTrue(handle.is_disposed)


class DispatchMutationTests(unittest.TestCase):
    """Validate behavior when handlers change the list they are called from."""

    def _build(self, bus: NotificationBus) -> tuple[list[str], object]:
        calls: list[str] = []
        late = object()

        def late_handler(message: Message) -> None:
            calls.append("late")

        def adder(message: Message) -> None:
            calls.append("adder")
            bus.subscribe("PING", SubscriptionHandle(late_handler, late))

        bus.subscribe("PING", SubscriptionHandle(adder))
        return calls, late

    def test_snapshot_dispatch_ignores_added_subscribers(self) -> None:
        bus = NotificationBus(snapshot_dispatch=True)
        calls, _ = self._build(bus)

        bus.dispatch(Message("PING"))
        self.assertEqual(calls, ["adder"])

    def test_live_dispatch_does_not_visit_appended_subscribers(self) -> None:
        bus = NotificationBus(snapshot_dispatch=False)
        calls, _ = self._build(bus)

        bus.dispatch(Message("PING"))
        self.assertEqual(calls, ["adder"])

    def test_snapshot_dispatch_still_reaches_removed_subscriber(self) -> None:
        bus = NotificationBus(snapshot_dispatch=True)
        calls: list[str] = []
        victim = object()

        def remover(message: Message) -> None:
            calls.append("remover")
            bus.unsubscribe("PING", victim)

        bus.subscribe("PING", SubscriptionHandle(remover))
        bus.subscribe("PING", SubscriptionHandle(lambda m: calls.append("victim"), victim))

        bus.dispatch(Message("PING"))
        self.assertEqual(calls, ["remover", "victim"])
        self.assertEqual(bus.subscriber_count("PING"), 1)

    def test_live_dispatch_shifts_after_self_removal(self) -> None:
        bus = NotificationBus(snapshot_dispatch=False)
        calls: list[str] = []
        first = object()

        def self_removing(message: Message) -> None:
            calls.append("first")
            bus.unsubscribe("PING", first)

        bus.subscribe("PING", SubscriptionHandle(self_removing, first))
        bus.subscribe("PING", SubscriptionHandle(lambda m: calls.append("second")))
        bus.subscribe("PING", SubscriptionHandle(lambda m: calls.append("third")))

        bus.dispatch(Message("PING"))

        # "second" slid into slot 0, which was already visited.
        self.assertEqual(calls, ["first", "third"])


if __name__ == "__main__":
    unittest.main()
