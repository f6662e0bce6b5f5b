"""Transformation helpers turning portal XML into typed records."""

from gpportal.transform.gateways import parse_gateways
from gpportal.transform.xml_utils import get_child_text, parse_document

__all__ = ["get_child_text", "parse_document", "parse_gateways"]
