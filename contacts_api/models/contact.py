# contacts_api/models/contact.py
from ..errors import MalformedInput, ValidationError

CONTACT_FIELDS = ('name', 'phone')

def decode_payload(data):
    """
    Checks that a decoded JSON body is an object whose contact fields,
    when present, are strings. Unknown keys are ignored.
    """
    if not isinstance(data, dict):
        raise MalformedInput()
    for field in CONTACT_FIELDS:
        if field in data and not isinstance(data[field], str):
            raise MalformedInput()
    return data


class Contact:
    def __init__(self, name, phone, _id=None):
        # _id stays None until the store assigns one on insert
        self._id = _id
        self.name = name
        self.phone = phone

    @property
    def id(self):
        return str(self._id) if self._id is not None else None

    @classmethod
    def from_dict(cls, data):
        return cls(
            _id=data.get('_id'),
            name=data.get('name', ''),
            phone=data.get('phone', '')
        )

    @classmethod
    def from_payload(cls, data):
        """Builds a new contact from a create request body."""
        data = decode_payload(data)
        name = data.get('name')
        phone = data.get('phone')
        if not name or not phone:
            raise ValidationError()
        return cls(name=name, phone=phone)

    def to_dict(self):
        data = {
            "name": self.name,
            "phone": self.phone
        }
        if self._id is not None:
            data["_id"] = self._id
        return data

    def to_json(self):
        return {
            "id": self.id,
            "name": self.name,
            "phone": self.phone
        }


class ContactUpdate:
    """
    A partial update. A field left as None was not supplied and is not
    touched; a supplied field must be a non-empty string.
    """
    def __init__(self, name=None, phone=None):
        self.name = name
        self.phone = phone

    @classmethod
    def from_payload(cls, data):
        data = decode_payload(data)
        update = cls(name=data.get('name'), phone=data.get('phone'))
        if update.name == '' or update.phone == '':
            raise ValidationError("Name and phone cannot be empty")
        return update

    def is_empty(self):
        return self.name is None and self.phone is None

    def to_dict(self):
        """Returns only the supplied fields, ready for a `$set`."""
        fields = {}
        if self.name is not None:
            fields['name'] = self.name
        if self.phone is not None:
            fields['phone'] = self.phone
        return fields
