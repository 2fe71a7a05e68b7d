"""
XML to mapping normalization.

Provider responses in Atom/XML are folded into plain dictionaries so
that adapters can address fields by their document names, for example
``body["content"]["m:properties"]["d:TableName"]``.
"""

import io
from typing import Any, Dict, Union
from xml.etree import ElementTree as ET

from ..exceptions import ResponseParseError


def xml_to_dict(text: Union[str, bytes]) -> Dict[str, Any]:
    """
    Convert an XML document into a nested dictionary.

    Rules:
    - the root element is stripped; its content becomes the result
    - names keep the prefix declared in the document ("m:properties"),
      elements in the default namespace use their bare local name
    - attributes are collected under "@"
    - an element with only text becomes that string ("" when empty)
    - text next to attributes or children is stored under "#"
    - repeated child names become lists in document order

    Args:
        text: XML document

    Returns:
        Dictionary for the root element's content

    Raises:
        ResponseParseError: If the document is not well-formed
    """
    if isinstance(text, str):
        text = text.encode("utf-8")
    if not text or not text.strip():
        return {}

    prefixes: Dict[str, str] = {}
    root = None
    try:
        for event, item in ET.iterparse(io.BytesIO(text), events=("start-ns", "start")):
            if event == "start-ns":
                prefix, uri = item
                prefixes.setdefault(uri, prefix)
            elif root is None:
                root = item
    except ET.ParseError as e:
        raise ResponseParseError(f"Invalid XML response: {e}") from e

    result = _convert(root, prefixes)
    if isinstance(result, str):
        return {"#": result} if result else {}
    return result


def _name(tag: str, prefixes: Dict[str, str]) -> str:
    if not tag.startswith("{"):
        return tag
    uri, local = tag[1:].split("}", 1)
    prefix = prefixes.get(uri)
    return f"{prefix}:{local}" if prefix else local


def _convert(element: ET.Element, prefixes: Dict[str, str]) -> Union[str, Dict[str, Any]]:
    attributes = {_name(key, prefixes): value for key, value in element.attrib.items()}
    children = list(element)
    text = (element.text or "").strip()

    if not attributes and not children:
        return text

    node: Dict[str, Any] = {}
    if attributes:
        node["@"] = attributes

    for child in children:
        key = _name(child.tag, prefixes)
        value = _convert(child, prefixes)
        if key not in node:
            node[key] = value
        elif isinstance(node[key], list):
            node[key].append(value)
        else:
            node[key] = [node[key], value]

    if text:
        node["#"] = text

    return node
