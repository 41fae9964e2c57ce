import json
import logging
import unittest

from inventory_api.core.logging import ContextFormatter, JsonFormatter, record_context


def _record(**extra):
    fields = {
        "name": "inventory_api.services.sale_service",
        "levelname": "INFO",
        "levelno": logging.INFO,
        "msg": "Sale %s recorded",
        "args": (12,),
    }
    fields.update(extra)
    return logging.makeLogRecord(fields)


class FormatterTest(unittest.TestCase):
    def test_record_context_only_returns_extra_fields(self):
        self.assertEqual(record_context(_record()), {})
        self.assertEqual(record_context(_record(sale_id=12, item_id=3)), {"sale_id": 12, "item_id": 3})

    def test_plain_lines_carry_context(self):
        formatter = ContextFormatter(fmt="%(levelname)s %(message)s")
        self.assertEqual(formatter.format(_record()), "INFO Sale 12 recorded")
        self.assertEqual(
            formatter.format(_record(sale_id=12, item_id=3)),
            "INFO Sale 12 recorded [sale_id=12 item_id=3]",
        )

    def test_json_lines_are_tagged(self):
        line = JsonFormatter("Inventory", "test").format(_record(item_id=3))
        payload = json.loads(line)
        self.assertEqual(payload["msg"], "Sale 12 recorded")
        self.assertEqual(payload["app"], "Inventory")
        self.assertEqual(payload["env"], "test")
        self.assertEqual(payload["context"], {"item_id": 3})
        self.assertNotIn("context", json.loads(JsonFormatter("Inventory", "test").format(_record())))


if __name__ == "__main__":
    unittest.main()
