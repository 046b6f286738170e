"""Main update message processing module"""
import logging

from .processors import (
    build_add,
    build_commit,
    build_delete_by_id,
    build_delete_by_query,
    build_optimize,
    build_rollback
)
from .validators import validate_payload
from .xml_builder import serialize_message

logger = logging.getLogger(__name__)


class MessageError(ValueError):
    """Base class for update request errors"""


class UnknownOperationError(MessageError):
    def __init__(self, operation):
        super().__init__(f"Unknown update operation: {operation}")
        self.operation = operation


class PayloadError(MessageError):
    def __init__(self, errors):
        super().__init__('; '.join(errors))
        self.errors = errors


def apply_attributes(doc_attrs, field_attrs):
    """Build an add callback that sets document and per-field attributes"""
    def callback(doc):
        doc.attrs.update(doc_attrs or {})
        for name, attrs in (field_attrs or {}).items():
            for field in doc.fields_by_name(name):
                field.attrs.update(attrs)
    return callback


def process_add(payload):
    callback = None
    if payload.get('doc_attrs') or payload.get('field_attrs'):
        callback = apply_attributes(payload.get('doc_attrs'), payload.get('field_attrs'))
    return build_add(payload['docs'], payload.get('attrs'), callback)


# operation name -> message tree builder for a validated payload
OPERATIONS = {
    'add': process_add,
    'commit': lambda payload: build_commit(payload.get('attrs')),
    'optimize': lambda payload: build_optimize(payload.get('attrs')),
    'rollback': lambda payload: build_rollback(),
    'delete_by_id': lambda payload: build_delete_by_id(payload['ids']),
    'delete_by_query': lambda payload: build_delete_by_query(payload['queries'])
}


def process_update(operation, payload=None, pretty=False):
    """Validate a payload and build the message string for "operation" """
    if operation not in OPERATIONS:
        raise UnknownOperationError(operation)

    payload = {} if payload is None else payload
    errors = validate_payload(operation, payload)
    if errors:
        logger.warning(f"Invalid {operation} payload: {errors}")
        raise PayloadError(errors)

    message = serialize_message(OPERATIONS[operation](payload), pretty=pretty)
    logger.info(f"Built {operation} message ({len(message)} characters)")
    return message
