"""Document and field objects for Solr update messages"""
from .message_utils import as_list, to_text


class Field:
    """A <field> element of a Solr update

    "attrs" is a dict of XML attributes and must hold a "name" entry.
    "value" is the text content of the node.
    """

    def __init__(self, attrs, value):
        self.attrs = attrs
        self.value = value

    @property
    def name(self):
        """The value of the "name" attribute"""
        return self.attrs['name']

    def __repr__(self):
        return f"Field({self.attrs!r}, {self.value!r})"


class Document:
    """A <doc> element of a Solr update

    "attrs" holds the <doc> XML attributes (boost, commitWithin, ...).
    "fields" is the ordered list of Field objects.
    """

    def __init__(self, doc_data=None):
        self.fields = []
        for field_name, values in (doc_data or {}).items():
            # one field per value for multi-valued fields
            for value in as_list(values):
                if to_text(value) == "":
                    continue
                self.fields.append(Field({'name': field_name}, value))
        self.attrs = {}

    def fields_by_name(self, name):
        """Return every field named "name", in insertion order"""
        return [field for field in self.fields if field.name == name]

    def field_by_name(self, name):
        """Return the first field named "name", or None"""
        return next((field for field in self.fields if field.name == name), None)

    def add_field(self, name, value, /, **options):
        """Add a field value to the document

        Options map directly to XML attributes of the <field> node:

            document.add_field('title', 'A Title', boost=2.0)
        """
        field = Field({**options, 'name': name}, value)
        self.fields.append(field)
        return field

    def __repr__(self):
        return f"Document(attrs={self.attrs!r}, fields={self.fields!r})"
