import unittest

from integration_check.integrations import INTEGRATIONS
from integration_check.models import StatusPayload, parse_relay_event

BY_KEY = {i.key: i for i in INTEGRATIONS}


class StatusPayloadTests(unittest.TestCase):
    def test_component_names_keep_order(self) -> None:
        status = StatusPayload.model_validate(
            {"components": {"github": {}, "replit": {}, "cursor": {}}, "uptime": 12}
        )
        self.assertEqual(status.component_names(), ["github", "replit", "cursor"])

    def test_webhook_url(self) -> None:
        status = StatusPayload.model_validate(
            {"components": {"github": {}, "replit": {"webhookUrl": "http://x.ngrok.io"}}}
        )
        self.assertEqual(status.webhook_url(), "http://x.ngrok.io")

    def test_webhook_url_missing_or_malformed(self) -> None:
        for components in ({}, {"replit": {}}, {"replit": "up"}, {"replit": {"webhookUrl": ""}}):
            with self.subTest(components=components):
                status = StatusPayload.model_validate({"components": components})
                self.assertIsNone(status.webhook_url())


class RelayEventTests(unittest.TestCase):
    def test_descriptors_use_response_fields(self) -> None:
        github = parse_relay_event({"event": {"event": "push", "action": "created"}})
        replit = parse_relay_event({"event": {"event": "build", "workspace": {"name": "api"}}})
        cursor = parse_relay_event({"event": {"event": "save", "file": "main.py"}})

        self.assertEqual(BY_KEY["github"].describe(github), "Event: push - created")
        self.assertEqual(BY_KEY["replit"].describe(replit), "Event: build on workspace api")
        self.assertEqual(BY_KEY["cursor"].describe(cursor), "Event: save on file main.py")

    def test_descriptors_fall_back_to_placeholders(self) -> None:
        payloads = [
            None,
            [],
            {"ok": True},
            {"event": "push"},
            {"event": {"event": ["push"], "action": None, "file": {}, "workspace": "prod"}},
            {"event": {"event": ""}},
        ]
        for payload in payloads:
            with self.subTest(payload=payload):
                ev = parse_relay_event(payload)
                self.assertEqual(BY_KEY["github"].describe(ev), "Event: workflow_run - completed")
                self.assertEqual(BY_KEY["replit"].describe(ev), "Event: deploy on workspace test")
                self.assertEqual(BY_KEY["cursor"].describe(ev), "Event: test on file test-file.js")

    def test_bad_field_does_not_discard_its_siblings(self) -> None:
        numeric = parse_relay_event({"event": {"event": 5, "file": "app.py"}})
        mixed = parse_relay_event({"event": {"event": "push", "file": ["x"], "action": 7.0}})
        workspace = parse_relay_event({"event": {"event": "deploy", "workspace": "prod"}})
        nameless = parse_relay_event({"event": {"event": "deploy", "workspace": {"name": {"id": 1}}}})

        self.assertEqual(BY_KEY["cursor"].describe(numeric), "Event: 5 on file app.py")
        self.assertEqual(BY_KEY["github"].describe(mixed), "Event: push - 7")
        self.assertEqual(BY_KEY["cursor"].describe(mixed), "Event: push on file test-file.js")
        self.assertEqual(BY_KEY["replit"].describe(workspace), "Event: deploy on workspace test")
        self.assertEqual(BY_KEY["replit"].describe(nameless), "Event: deploy on workspace test")


if __name__ == "__main__":
    unittest.main()
