"""
Tests for templates and logging helpers.
"""

import json
import logging

import pytest

from cloudkit_sdk.exceptions import TemplateError
from cloudkit_sdk.logging_setup import JsonFormatter, sanitize_for_logging
from cloudkit_sdk.utils import templates


def test_render_template(tmp_path):
    path = tmp_path / "body.xml"
    path.write_text("<n>{{ name }}</n><d>{{ date }}</d>\n", encoding="utf-8")

    body = templates.render(str(path), {"name": "a&b", "date": "2024-01-01T00:00:00.000Z"})

    assert body == "<n>a&amp;b</n><d>2024-01-01T00:00:00.000Z</d>\n"


def test_missing_template(tmp_path):
    with pytest.raises(TemplateError, match="Unable to load template"):
        templates.load(str(tmp_path / "missing.xml"))


def test_missing_parameter(tmp_path):
    path = tmp_path / "body.xml"
    path.write_text("<n>{{ name }}</n>", encoding="utf-8")

    with pytest.raises(TemplateError, match="Unable to render template"):
        templates.render(str(path), {})


def test_sanitize_for_logging():
    headers = {
        "Authorization": "SharedKeyLite acct:sig",
        "X-Auth-Token": "tok",
        "Accept": "application/json",
        "auth": {"apiKey": "k", "username": "u"},
    }

    assert sanitize_for_logging(headers) == {
        "Authorization": "***REDACTED***",
        "X-Auth-Token": "***REDACTED***",
        "Accept": "application/json",
        "auth": {"apiKey": "***REDACTED***", "username": "u"},
    }


def test_json_formatter():
    record = logging.LogRecord("cloudkit_sdk.transport", logging.INFO, __file__, 1, "sent %s", ("GET",), None)
    record.provider = "azure.tables"

    payload = json.loads(JsonFormatter().format(record))

    assert payload["name"] == "cloudkit_sdk.transport"
    assert payload["level"] == "INFO"
    assert payload["msg"] == "sent GET"
    assert payload["provider"] == "azure.tables"
