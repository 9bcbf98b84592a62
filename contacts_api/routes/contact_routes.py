# contacts_api/routes/contact_routes.py
from flask import Blueprint, request, jsonify, current_app
from werkzeug.exceptions import MethodNotAllowed
from ..models.contact import Contact, ContactUpdate
from ..errors import MissingContactId

bp = Blueprint('contacts', __name__)

def get_contact_service():
    return current_app.extensions['contact_service']

def read_json_body():
    # Parsed regardless of Content-Type; None when the body is not valid JSON
    return request.get_json(force=True, silent=True)

@bp.route('/contacts', methods=['POST'])
def create_contact():
    contact = Contact.from_payload(read_json_body())
    contact = get_contact_service().create_contact(contact)
    return jsonify({
        'message': 'Contact created successfully',
        'contact': contact.to_json()
    })

@bp.route('/contacts', methods=['GET'])
@bp.route('/contacts/', methods=['GET'])
def list_contacts():
    contacts = get_contact_service().get_contacts()
    return jsonify([contact.to_json() for contact in contacts])

# Not strict so that PUT/DELETE on "/contacts" land here instead of being redirected
@bp.route('/contacts/', methods=['PUT', 'DELETE'], strict_slashes=False)
def missing_contact_id():
    if not request.path.endswith('/'):
        raise MethodNotAllowed(valid_methods=['GET', 'POST'])
    raise MissingContactId()

# The path converter keeps the whole remainder as the ID, so "a/b" fails ID validation (400)
@bp.route('/contacts/<path:contact_id>', methods=['GET'])
def get_contact(contact_id):
    contact = get_contact_service().get_contact(contact_id)
    return jsonify(contact.to_json())

@bp.route('/contacts/<path:contact_id>', methods=['PUT'])
def update_contact(contact_id):
    contact_service = get_contact_service()
    # Reject a malformed ID before looking at the body
    contact_service.parse_contact_id(contact_id)
    update = ContactUpdate.from_payload(read_json_body())
    contact_service.update_contact(contact_id, update)
    return jsonify({'message': 'Contact updated successfully'})

@bp.route('/contacts/<path:contact_id>', methods=['DELETE'])
def delete_contact(contact_id):
    get_contact_service().delete_contact(contact_id)
    return jsonify({'message': 'Contact deleted successfully'})
