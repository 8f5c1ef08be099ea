"""Log level filtering and line formatting."""

from __future__ import annotations

import sys
import unittest
from unittest import mock

import config as cfg
import showlog


class ShowlogTests(unittest.TestCase):

    def setUp(self) -> None:
        patcher = mock.patch.multiple(
            cfg,
            LOG_OFF=False,
            LOG_LEVEL=2,
            LOG_TO_FILE=False,
            LOG_TO_CONSOLE=False,
            DEBUG=False,
            DEBUG_LOG=False,
            VERBOSE_LOG=False,
        )
        patcher.start()
        self.addCleanup(patcher.stop)
        showlog.lastmsg = ""

    def test_info_is_tagged_with_caller(self) -> None:
        line = showlog.info("[AUDIO] mixer ready")
        self.assertTrue(line.startswith("[INFO test_showlog:"))
        self.assertTrue(line.endswith("[AUDIO] mixer ready"))
        self.assertEqual(showlog.last(), line)

    def test_caller_file_named_like_logger_is_tagged(self) -> None:
        # this file's name ends in "showlog.py" too; it must still be the tag
        expected_line = sys._getframe().f_lineno + 1
        line = showlog.warn("[APP] tagged here")
        self.assertEqual(line, f"[WARN test_showlog:{expected_line}] [APP] tagged here")

    def test_level_filter(self) -> None:
        cfg.LOG_LEVEL = 0
        self.assertIsNone(showlog.info("[APP] hidden"))
        self.assertIsNone(showlog.warn("[APP] hidden too"))
        self.assertIsNotNone(showlog.error("[APP] always shown"))

        cfg.LOG_LEVEL = 1
        self.assertIsNotNone(showlog.warn("[APP] now shown"))

    def test_debug_needs_both_switches(self) -> None:
        cfg.DEBUG = True
        self.assertIsNone(showlog.debug("[APP] detail"))
        cfg.DEBUG_LOG = True
        self.assertTrue(showlog.debug("[APP] detail").startswith("[DEBUG "))

    def test_verbose_switch(self) -> None:
        self.assertIsNone(showlog.verbose("[AUDIO] C3 → channel 1"))
        cfg.VERBOSE_LOG = True
        self.assertIsNotNone(showlog.verbose("[AUDIO] C3 → channel 1"))

    def test_duplicates_suppressed(self) -> None:
        lines = [showlog.info("[LOOP] same") for _ in range(2)]
        self.assertIsNotNone(lines[0])
        self.assertIsNone(lines[1])

    def test_log_off(self) -> None:
        cfg.LOG_OFF = True
        self.assertIsNone(showlog.error("[APP] nothing"))

    def test_plain_message_is_info(self) -> None:
        line = showlog.log("plain text")
        self.assertTrue(line.startswith("[INFO "))
        self.assertTrue(line.endswith("plain text"))

    def test_error_appends_traceback(self) -> None:
        try:
            raise ValueError("bad sample")
        except ValueError as exc:
            line = showlog.error("[AUDIO] decode failed", exc)
        self.assertIn("Traceback", line)
        self.assertIn("ValueError: bad sample", line)

    def test_format_line(self) -> None:
        with mock.patch.object(cfg, "SHOW_LOG_TYPE_AS_TEXT", False):
            self.assertRegex(showlog.format_line("[WARN x:1] y"), r"^\[\d\d:\d\d:\d\d\] W \[WARN x:1\] y$")
        self.assertRegex(showlog.format_line("[INFO x:1] y"), r"^\[\d\d:\d\d:\d\d\] \[INFO x:1\] y$")


if __name__ == "__main__":  # pragma: no cover
    unittest.main(exit=False)
