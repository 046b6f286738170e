"""XML building utilities for Solr update messages"""
from lxml import etree

from .message_utils import to_attributes, to_text


def create_root(name, attrs=None):
    """Create a message root element carrying "attrs" as XML attributes"""
    return etree.Element(name, to_attributes(attrs))


def add_element(parent, name, text=None, attrs=None):
    """Add a child element with optional attributes and text content"""
    element = etree.SubElement(parent, name, to_attributes(attrs))
    if text is not None:
        element.text = to_text(text)
    return element


def serialize_message(root, pretty=False):
    """Serialize a message tree to a unicode string without XML declaration"""
    return etree.tostring(root, encoding='unicode', pretty_print=pretty)
