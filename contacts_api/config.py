# contacts_api/config.py
import os
from dotenv import load_dotenv

load_dotenv()

class Config:
    MONGO_URI = os.getenv('MONGO_URI', 'mongodb://user-db:27017/contacts_db')
    # Used when MONGO_URI does not name a database
    MONGO_DBNAME = os.getenv('MONGO_DBNAME', 'contacts_db')

    HOST = os.getenv('HOST', '0.0.0.0')
    PORT = int(os.getenv('PORT', '5000'))

    # Store timeouts (seconds)
    STORE_TIMEOUT_SECONDS = float(os.getenv('STORE_TIMEOUT_SECONDS', '5'))
    STORE_CONNECT_TIMEOUT_SECONDS = float(os.getenv('STORE_CONNECT_TIMEOUT_SECONDS', '10'))

    # Cross-origin headers sent on every response
    CORS_ALLOW_ORIGIN = os.getenv('CORS_ALLOW_ORIGIN', '*')
    CORS_ALLOW_HEADERS = os.getenv('CORS_ALLOW_HEADERS', 'Content-Type, Authorization')
    CORS_ALLOW_METHODS = os.getenv('CORS_ALLOW_METHODS', 'GET, POST, PUT, DELETE, OPTIONS')

    # Logging configuration
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_FILE = os.getenv('LOG_FILE', 'logs/contacts_api.log') or None
    LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    LOG_MAX_BYTES = 1024 * 1024  # 1MB
    LOG_BACKUP_COUNT = 5
