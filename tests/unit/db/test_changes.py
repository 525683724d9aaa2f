"""Unit tests for the change feed and live query lifecycle."""

import pytest

from app.core.errors import DataError
from app.db.changes import ChangeFeed


class TestChangeFeed:

    def test_watch_delivers_current_state_immediately(self):
        feed = ChangeFeed()
        received = []
        feed.watch("things", lambda: [1, 2], received.append)
        assert received == [[1, 2]]

    def test_publish_redelivers_full_result(self):
        feed = ChangeFeed()
        rows = [1]
        received = []
        feed.watch("things", lambda: list(rows), received.append)

        rows.append(2)
        feed.publish("things")
        assert received == [[1], [1, 2]]

    def test_other_collections_do_not_trigger(self):
        feed = ChangeFeed()
        received = []
        feed.watch("things", lambda: [], received.append)
        feed.publish("other")
        assert len(received) == 1

    def test_cancel_stops_delivery_and_unregisters(self):
        feed = ChangeFeed()
        received = []
        subscription = feed.watch("things", lambda: [], received.append)
        assert feed.subscriber_count("things") == 1

        subscription.cancel()
        feed.publish("things")
        assert len(received) == 1
        assert not subscription.active
        assert feed.subscriber_count("things") == 0

    def test_cancel_twice_is_harmless(self):
        feed = ChangeFeed()
        subscription = feed.watch("things", lambda: [], lambda rows: None)
        subscription.cancel()
        subscription.cancel()
        assert feed.subscriber_count("things") == 0

    def test_query_failure_goes_to_error_handler(self):
        feed = ChangeFeed()
        errors = []
        received = []

        def broken():
            raise DataError("boom")

        subscription = feed.watch("things", broken, received.append, errors.append)
        assert received == []
        assert len(errors) == 1
        assert errors[0].message == "boom"
        assert subscription.active

    def test_query_failure_without_handler_is_logged(self, caplog):
        feed = ChangeFeed()

        def broken():
            raise DataError("boom")

        feed.watch("things", broken, lambda rows: None)
        assert "boom" in caplog.text

    def test_failing_consumer_does_not_block_others(self):
        feed = ChangeFeed()
        received = []
        calls = { "n": 0 }

        def flaky(rows):
            calls["n"] += 1
            if calls["n"] > 1:
                raise RuntimeError("consumer bug")

        feed.watch("things", lambda: [1], flaky)
        feed.watch("things", lambda: [1], received.append)
        feed.publish("things")
        assert received == [[1], [1]]

    def test_consumer_failing_on_first_delivery_is_unregistered(self):
        feed = ChangeFeed()

        def broken(rows):
            raise RuntimeError("consumer bug")

        with pytest.raises(RuntimeError):
            feed.watch("things", lambda: [1], broken)
        assert feed.subscriber_count("things") == 0
        feed.publish("things")
