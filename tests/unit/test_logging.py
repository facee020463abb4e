import json
import logging
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "progress"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from yearwall_core.logging_setup import JsonFormatter, configure_logging, get_logger, install_excepthook


def _detach(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


class JsonFormatterTests(unittest.TestCase):
    def test_extra_fields_become_keys(self):
        record = logging.LogRecord("yearwall.cli", logging.INFO, __file__, 1, "rendered %s", ("x.png",), None)
        record.event = "wallpaper_rendered"
        record.widget = "dotgrid"
        record.width = 1179
        payload = json.loads(JsonFormatter().format(record))
        self.assertEqual(payload["msg"], "rendered x.png")
        self.assertEqual(payload["event"], "wallpaper_rendered")
        self.assertEqual(payload["widget"], "dotgrid")
        self.assertEqual(payload["width"], 1179)
        self.assertNotIn("args", payload)
        self.assertNotIn("lineno", payload)

    def test_unserializable_extras_are_stringified(self):
        record = logging.LogRecord("yearwall", logging.INFO, __file__, 1, "saved", None, None)
        record.output = Path("/tmp/out.png")
        self.assertEqual(json.loads(JsonFormatter().format(record))["output"], str(Path("/tmp/out.png")))


class ConfigureLoggingTests(unittest.TestCase):
    def setUp(self):
        self.logger = logging.getLogger("yearwall")
        _detach(self.logger)
        self.addCleanup(_detach, self.logger)
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.root = Path(self.tmp.name)

    def test_writes_json_lines_under_config_root(self):
        with patch("yearwall_core.config.config_root", return_value=self.root):
            configure_logging(console=False)
            get_logger("share").warning("skipped zone", extra={"event": "timezone_fallback", "source": "param"})
        for handler in self.logger.handlers:
            handler.flush()

        lines = (self.root / "logs" / "yearwall.log").read_text(encoding="utf-8").splitlines()
        self.assertEqual(len(lines), 1)
        payload = json.loads(lines[0])
        self.assertEqual(payload["logger"], "yearwall.share")
        self.assertEqual(payload["level"], "WARNING")
        self.assertEqual(payload["source"], "param")

    def test_configure_is_idempotent(self):
        with patch("yearwall_core.config.config_root", return_value=self.root):
            configure_logging(console=True)
            configure_logging(console=True)
        self.assertEqual(len(self.logger.handlers), 2)

    def test_excepthook_logs_crash_id(self):
        with patch.object(sys, "excepthook", sys.excepthook), patch.object(sys, "__excepthook__") as chained:
            install_excepthook()
            with self.assertLogs("yearwall", level="CRITICAL") as captured:
                sys.excepthook(RuntimeError, RuntimeError("boom"), None)
        self.assertTrue(chained.called)
        record = captured.records[0]
        self.assertEqual(record.event, "uncaught_exception")
        self.assertEqual(len(record.crash_id), 32)


if __name__ == "__main__":
    unittest.main()
