"""
Test cases for the repair log.
"""

import unittest

from jsonmend.recovery.log import RepairAction, RepairEvent, RepairLog, RepairResult


class TestRepairLog(unittest.TestCase):
    """Test recording and summarizing repair events."""

    def test_records_in_order(self):
        repair_log = RepairLog()
        repair_log.record(3, RepairAction.INSERTED_COMMA, "inserted missing comma")
        repair_log.record(1, RepairAction.CLOSED_STRING, "closed unterminated string")

        self.assertEqual(len(repair_log), 2)
        self.assertEqual(
            repair_log.actions(),
            [RepairAction.INSERTED_COMMA, RepairAction.CLOSED_STRING],
        )
        self.assertEqual([event.position for event in repair_log], [3, 1])

    def test_disabled_log_drops_events(self):
        repair_log = RepairLog(enabled=False)
        repair_log.record(0, RepairAction.INSERTED_COMMA, "inserted missing comma")
        self.assertEqual(len(repair_log), 0)

    def test_events_are_logged_at_debug(self):
        repair_log = RepairLog()
        with self.assertLogs("jsonmend.recovery.log", level="DEBUG") as cm:
            repair_log.record(5, RepairAction.DROPPED_CHARACTER, "dropped stray ';'")
        self.assertIn("dropped stray ';' at position 5", cm.output[0])

    def test_summary(self):
        repair_log = RepairLog()
        repair_log.record(0, RepairAction.INSERTED_COMMA, "a")
        repair_log.record(1, RepairAction.INSERTED_COMMA, "b")
        repair_log.record(2, RepairAction.ADDED_QUOTES, "c")

        summary = repair_log.summary()
        self.assertEqual(summary["total_repairs"], 3)
        self.assertEqual(
            summary["repair_types"], {"inserted_comma": 2, "added_quotes": 1}
        )
        self.assertEqual(summary["most_common"][0], "inserted_comma")

    def test_event_str(self):
        event = RepairEvent(7, RepairAction.REMOVED_COMMA, "removed trailing comma")
        self.assertEqual(str(event), "removed trailing comma at position 7")


class TestRepairResult(unittest.TestCase):
    def test_was_repaired(self):
        self.assertFalse(RepairResult([1]).was_repaired)
        event = RepairEvent(0, RepairAction.ADDED_QUOTES, "added quotes")
        self.assertTrue(RepairResult("a", [event]).was_repaired)


if __name__ == "__main__":
    unittest.main()
