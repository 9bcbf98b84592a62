# contacts_api/services/contact_service.py
import logging
import pymongo
from bson import ObjectId
from bson.errors import InvalidId
from pymongo.errors import PyMongoError
from ..models.contact import Contact
from ..errors import InvalidContactId, ContactNotFound, StoreUnavailable

logger = logging.getLogger(__name__)

class ContactService:
    def __init__(self, db, timeout=5):
        self.db = db
        self.contacts_collection = db['contacts']
        # Upper bound, in seconds, for every store call made by this service
        self.timeout = timeout

    def parse_contact_id(self, contact_id):
        """Converts a hex contact ID to an ObjectId or raises InvalidContactId."""
        try:
            return ObjectId(contact_id)
        except (InvalidId, TypeError) as e:
            raise InvalidContactId() from e

    def ping(self, timeout=None):
        """Checks the store is reachable. Raises StoreUnavailable if it is not."""
        try:
            with pymongo.timeout(timeout or self.timeout):
                self.db.command('ping')
        except PyMongoError as e:
            logger.error(f"Failed to ping MongoDB: {e}")
            raise StoreUnavailable("Failed to connect to the database") from e

    def create_contact(self, contact):
        try:
            with pymongo.timeout(self.timeout):
                result = self.contacts_collection.insert_one(contact.to_dict())
        except PyMongoError as e:
            logger.error(f"Failed to insert contact: {e}")
            raise StoreUnavailable("Failed to create contact") from e

        logger.info(f"Created contact {result.inserted_id}")
        return Contact(name=contact.name, phone=contact.phone, _id=result.inserted_id)

    def get_contacts(self):
        try:
            with pymongo.timeout(self.timeout):
                documents = list(self.contacts_collection.find({}))
        except PyMongoError as e:
            logger.error(f"Failed to list contacts: {e}")
            raise StoreUnavailable("Failed to retrieve contacts") from e
        return [Contact.from_dict(doc) for doc in documents]

    def get_contact(self, contact_id):
        oid = self.parse_contact_id(contact_id)
        try:
            with pymongo.timeout(self.timeout):
                document = self.contacts_collection.find_one({"_id": oid})
        except PyMongoError as e:
            logger.error(f"Failed to fetch contact {contact_id}: {e}")
            raise StoreUnavailable("Database error") from e

        if document is None:
            raise ContactNotFound()
        return Contact.from_dict(document)

    def update_contact(self, contact_id, update):
        """
        Applies only the fields present on `update`. An update with no
        fields writes nothing but still requires the contact to exist.
        """
        oid = self.parse_contact_id(contact_id)
        fields = update.to_dict()
        try:
            with pymongo.timeout(self.timeout):
                if update.is_empty():
                    matched = self.contacts_collection.find_one({"_id": oid}, {"_id": 1}) is not None
                else:
                    result = self.contacts_collection.update_one({"_id": oid}, {"$set": fields})
                    matched = result.matched_count
        except PyMongoError as e:
            logger.error(f"Failed to update contact {contact_id}: {e}")
            raise StoreUnavailable("Failed to update contact") from e

        if not matched:
            raise ContactNotFound()
        if fields:
            logger.info(f"Updated contact {contact_id}: {', '.join(fields)}")

    def delete_contact(self, contact_id):
        oid = self.parse_contact_id(contact_id)
        try:
            with pymongo.timeout(self.timeout):
                result = self.contacts_collection.delete_one({"_id": oid})
        except PyMongoError as e:
            logger.error(f"Failed to delete contact {contact_id}: {e}")
            raise StoreUnavailable("Failed to delete contact") from e

        if result.deleted_count == 0:
            raise ContactNotFound()
        logger.info(f"Deleted contact {contact_id}")
