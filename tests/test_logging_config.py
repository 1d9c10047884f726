import json
import logging
import os
import tempfile
import unittest

from online_store import logging_config


class TestJsonLogging(unittest.TestCase):

    def tearDown(self):
        root = logging.getLogger()
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()

    def test_formatter_merges_extra(self):
        record = logging.LogRecord("online_store.app", logging.INFO, __file__, 1, "Checkout completed", None, None)
        record.extra = {"order_id": 3, "payment_method": "GCash"}
        payload = json.loads(logging_config.JsonFormatter().format(record))
        self.assertEqual(payload["message"], "Checkout completed")
        self.assertEqual(payload["level"], "INFO")
        self.assertEqual(payload["order_id"], 3)
        self.assertEqual(payload["payment_method"], "GCash")
        self.assertIn("timestamp", payload)

    def test_configure_logging_writes_json_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            logging_config.configure_logging(log_dir=tmp)
            logging.getLogger("online_store.test").info("hello", extra={"extra": {"k": "v"}})
            for handler in logging.getLogger().handlers:
                handler.flush()
            with open(os.path.join(tmp, "online_store.log"), encoding="utf-8") as f:
                lines = [json.loads(line) for line in f if line.strip()]
            self.assertEqual(lines[-1]["message"], "hello")
            self.assertEqual(lines[-1]["k"], "v")


if __name__ == "__main__":
    unittest.main(verbosity=2)
