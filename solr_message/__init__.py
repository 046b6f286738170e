"""Solr update message builder"""
from .main import create_app
from .utils.message import Document, Field
from .utils.processors import (
    add,
    build_add,
    build_commit,
    build_delete_by_id,
    build_delete_by_query,
    build_optimize,
    build_rollback,
    commit,
    delete_by_id,
    delete_by_query,
    optimize,
    rollback
)
from .utils.xml_builder import serialize_message

__all__ = [
    'create_app',
    'Document',
    'Field',
    'add',
    'commit',
    'optimize',
    'rollback',
    'delete_by_id',
    'delete_by_query',
    'build_add',
    'build_commit',
    'build_optimize',
    'build_rollback',
    'build_delete_by_id',
    'build_delete_by_query',
    'serialize_message'
]
