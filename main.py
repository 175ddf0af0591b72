"""
Meet Bridge Service
Flask application that creates Google Meet spaces via Google OAuth.
"""

import logging
import os

from dotenv import load_dotenv

from meet_bridge.app import configure_logging, create_app

logger = logging.getLogger(__name__)

# Load environment variables
load_dotenv()

configure_logging()

app = create_app()


if __name__ == '__main__':
    port = int(os.getenv("PORT", 8080))
    debug = os.getenv("DEBUG", "false").lower() == "true"

    logger.info("Starting Meet Bridge Service on port %s", port)

    app.run(host='0.0.0.0', port=port, debug=debug)
