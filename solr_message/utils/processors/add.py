"""Add message processing module"""
from collections.abc import Mapping

from ..message import Document
from ..message_utils import as_list, to_text
from ..xml_builder import add_element, create_root, serialize_message


def to_document(doc):
    """Resolve one input item to a Document

    A Document is used as-is, a mapping is expanded into a new Document.
    """
    if isinstance(doc, Document):
        return doc
    if isinstance(doc, Mapping):
        return Document(doc)
    raise TypeError(f"Expected a mapping or Document, got {type(doc).__name__}")


def add_doc_element(parent, doc):
    """Serialize a Document as a <doc> child of "parent" """
    doc_elem = add_element(parent, 'doc', attrs=doc.attrs)
    for field in doc.fields:
        attrs = dict(field.attrs)
        attrs['name'] = to_text(field.name)
        # an empty value still yields an (empty) <field> node
        add_element(doc_elem, 'field', field.value, attrs=attrs)
    return doc_elem


def build_add(data, add_attrs=None, callback=None):
    """Build an <add> message tree

    "data" is a mapping, a Document, or a list of those. Mapping values that
    are lists become one field per non-empty item.

    "add_attrs" become attributes of the <add> element.

    "callback" is called with each Document after it is created and before
    it is serialized; it may change the document or field attributes:

        def boost(doc):
            doc.attrs['boost'] = 10
            nickname = doc.field_by_name('nickname')
            if nickname is not None and nickname.value == 'Tim':
                nickname.attrs['boost'] = 20

        add({'id': 1, 'nickname': 'Tim'}, {'commitWithin': 1000}, boost)
    """
    add_elem = create_root('add', add_attrs)
    for item in as_list(data):
        doc = to_document(item)
        if callback is not None:
            callback(doc)
        add_doc_element(add_elem, doc)
    return add_elem


def add(data, add_attrs=None, callback=None):
    """Generate an <add> message string"""
    return serialize_message(build_add(data, add_attrs, callback))
