"""
Unit tests for the change notifier
"""
from cadenza.services.notifications import ChangeKind, ChangeNotifier


class TestChangeNotifier:
    """Test observer registration and delivery"""

    def test_subscribe_and_unsubscribe(self):
        notifier = ChangeNotifier()
        received = []
        unsubscribe = notifier.subscribe(received.append)
        notifier.publish(ChangeKind.COLLECTION_CHANGED, "add_habit", "h1")
        unsubscribe()
        notifier.publish(ChangeKind.COLLECTION_CHANGED, "remove_habit", "h1")

        assert len(received) == 1
        assert received[0].command == "add_habit"
        assert received[0].subject_id == "h1"
        assert notifier.observer_count == 0

    def test_unsubscribe_unknown(self):
        assert ChangeNotifier().unsubscribe(print) is False

    def test_failing_observer_does_not_block_others(self):
        notifier = ChangeNotifier()
        received = []

        def broken(event):
            raise RuntimeError("render failed")

        notifier.subscribe(broken)
        notifier.subscribe(received.append)
        event = notifier.publish(ChangeKind.SELECTION_CHANGED, "select")

        assert received == [event]
