# run.py
import logging
import sys
from contacts_api import create_app
from contacts_api.errors import StoreUnavailable

def main():
    try:
        app = create_app()
    except StoreUnavailable as e:
        # No traffic is served without a database connection
        logging.getLogger('contacts_api').critical(f"Startup aborted: {e.message}")
        sys.exit(1)

    app.logger.info(f"Contacts API running on port {app.config['PORT']}...")
    app.run(host=app.config['HOST'], port=app.config['PORT'], threaded=True)

if __name__ == "__main__":
    main()
