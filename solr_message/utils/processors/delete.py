"""Delete message processing module"""
from ..message_utils import as_list
from ..xml_builder import add_element, create_root, serialize_message


def build_delete(tag, values):
    """Build a <delete> tree with one "tag" child per value, in order"""
    delete_elem = create_root('delete')
    for value in as_list(values):
        add_element(delete_elem, tag, value)
    return delete_elem


def build_delete_by_id(ids):
    return build_delete('id', ids)


def build_delete_by_query(queries):
    return build_delete('query', queries)


def delete_by_id(ids):
    """Generate a <delete><id>ID</id></delete> message

    "ids" can be a single value or a list of values.
    """
    return serialize_message(build_delete_by_id(ids))


def delete_by_query(queries):
    """Generate a <delete><query>QUERY</query></delete> message

    "queries" can be a single value or a list of values. Queries are not
    parsed or checked.
    """
    return serialize_message(build_delete_by_query(queries))
