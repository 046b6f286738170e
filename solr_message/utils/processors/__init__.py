"""Solr update message processors package"""
from .add import add, build_add
from .single import (
    build_commit,
    build_optimize,
    build_rollback,
    commit,
    optimize,
    rollback
)
from .delete import build_delete_by_id, build_delete_by_query, delete_by_id, delete_by_query

__all__ = [
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
    'build_delete_by_query'
]
