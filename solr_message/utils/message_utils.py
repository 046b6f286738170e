"""Utility functions for update message generation"""


def to_text(value):
    """Render a value the way the update handler reads it"""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def as_list(value):
    """Wrap anything that is not a list or tuple into a one-element list"""
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def to_attributes(attrs):
    """Convert an attribute mapping to XML attribute strings"""
    return {str(key): to_text(value) for key, value in (attrs or {}).items()}
