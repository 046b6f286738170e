"""Single element message processing module (commit, optimize, rollback)"""
from ..xml_builder import create_root, serialize_message


def build_single_element(name, opts=None):
    """Build a childless message element whose attributes are "opts" """
    return create_root(name, opts)


def build_commit(opts=None):
    return build_single_element('commit', opts)


def build_optimize(opts=None):
    return build_single_element('optimize', opts)


def build_rollback():
    return build_single_element('rollback')


def commit(opts=None):
    """Generate a <commit/> message, e.g. commit({'waitSearcher': False})"""
    return serialize_message(build_commit(opts))


def optimize(opts=None):
    """Generate an <optimize/> message"""
    return serialize_message(build_optimize(opts))


def rollback():
    """Generate a <rollback/> message"""
    return serialize_message(build_rollback())
