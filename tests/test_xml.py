"""
Tests for XML normalization.
"""

import pytest

from cloudkit_sdk.exceptions import ResponseParseError
from cloudkit_sdk.utils.xml import xml_to_dict


def test_strips_root_and_keeps_prefixes():
    document = """<?xml version="1.0" encoding="utf-8"?>
    <entry xmlns="http://www.w3.org/2005/Atom"
           xmlns:m="urn:metadata" xmlns:d="urn:data">
      <id>urn:1</id>
      <content type="application/xml">
        <m:properties><d:TableName>t1</d:TableName></m:properties>
      </content>
    </entry>"""

    result = xml_to_dict(document)

    assert result == {
        "id": "urn:1",
        "content": {
            "@": {"type": "application/xml"},
            "m:properties": {"d:TableName": "t1"},
        },
    }


def test_repeated_elements_become_list():
    result = xml_to_dict("<feed><entry><a>1</a></entry><entry><a>2</a></entry><entry><a>3</a></entry></feed>")

    assert result == {"entry": [{"a": "1"}, {"a": "2"}, {"a": "3"}]}


def test_single_element_stays_mapping():
    assert xml_to_dict("<feed><entry><a>1</a></entry></feed>") == {"entry": {"a": "1"}}


def test_text_with_attributes():
    result = xml_to_dict('<r xmlns:m="urn:m"><v m:type="Edm.Int32">5</v><e /></r>')

    assert result == {"v": {"@": {"m:type": "Edm.Int32"}, "#": "5"}, "e": ""}


def test_accepts_bytes():
    assert xml_to_dict(b"<r><a>x</a></r>") == {"a": "x"}


def test_text_only_root():
    assert xml_to_dict("<r>hello</r>") == {"#": "hello"}
    assert xml_to_dict("<r/>") == {}


def test_empty_document():
    assert xml_to_dict("") == {}
    assert xml_to_dict("   ") == {}


def test_malformed_document():
    with pytest.raises(ResponseParseError):
        xml_to_dict("<r><a></r>")
