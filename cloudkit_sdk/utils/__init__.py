"""
Utility modules for CloudKit SDK.
"""

from .xml import xml_to_dict
from .templates import load, render

__all__ = ["xml_to_dict", "load", "render"]
