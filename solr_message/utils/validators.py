from collections.abc import Mapping

SCALAR_TYPES = (str, int, float, bool)


def is_scalar(value):
    return value is None or isinstance(value, SCALAR_TYPES)


def validate_attributes(attrs, label):
    """
    Validate an XML attribute map
    Returns: list of error messages (empty if all valid)
    """
    if attrs is None:
        return []
    if not isinstance(attrs, Mapping):
        return [f'{label} must be an object']
    errors = []
    for key, value in attrs.items():
        if not is_scalar(value):
            errors.append(f'{label}: value of "{key}" must be a scalar')
    return errors


def validate_values(values, label):
    """Validate a scalar or a list of scalars (ids, queries)"""
    if values is None:
        return [f'{label} is required']
    if isinstance(values, list):
        if not values:
            return [f'{label} must not be empty']
        if not all(is_scalar(value) for value in values):
            return [f'{label} must only contain scalars']
        if any(value is None for value in values):
            return [f'{label} must not contain null values']
        return []
    if not is_scalar(values):
        return [f'{label} must be a scalar or a list of scalars']
    return []


def validate_docs(docs):
    """Validate the documents of an add payload"""
    if docs is None:
        return ['docs is required']
    if isinstance(docs, Mapping):
        docs = [docs]
    if not isinstance(docs, list):
        return ['docs must be an object or a list of objects']

    errors = []
    for index, doc in enumerate(docs):
        if not isinstance(doc, Mapping):
            errors.append(f'docs[{index}] must be an object')
            continue
        for name, value in doc.items():
            if not (is_scalar(value) or (isinstance(value, list) and all(is_scalar(v) for v in value))):
                errors.append(f'docs[{index}]: field "{name}" must be a scalar or a list of scalars')
    return errors


def validate_payload(operation, payload):
    """
    Validate the JSON payload of an update operation
    Returns: list of error messages (empty if all valid)
    """
    if payload is None:
        payload = {}
    if not isinstance(payload, Mapping):
        return ['Payload must be a JSON object']

    errors = []
    if operation == 'add':
        errors.extend(validate_docs(payload.get('docs')))
        errors.extend(validate_attributes(payload.get('attrs'), 'attrs'))
        errors.extend(validate_attributes(payload.get('doc_attrs'), 'doc_attrs'))
        field_attrs = payload.get('field_attrs')
        if field_attrs is not None:
            if not isinstance(field_attrs, Mapping):
                errors.append('field_attrs must be an object')
            else:
                for name, attrs in field_attrs.items():
                    errors.extend(validate_attributes(attrs, f'field_attrs.{name}'))
                    # a field keeps the name it was created with
                    if isinstance(attrs, Mapping) and 'name' in attrs:
                        errors.append(f'field_attrs.{name}: "name" cannot be changed')
    elif operation in ('commit', 'optimize'):
        errors.extend(validate_attributes(payload.get('attrs'), 'attrs'))
    elif operation == 'delete_by_id':
        errors.extend(validate_values(payload.get('ids'), 'ids'))
    elif operation == 'delete_by_query':
        errors.extend(validate_values(payload.get('queries'), 'queries'))

    return errors
