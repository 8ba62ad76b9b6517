"""
Entry Point for Cloud Server Deployment

Starts the founding member spots API with uvicorn. Cloud hosts set
the PORT environment variable; it defaults to 8000.
"""

import logging
import sys

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)


def main():
    """Run the API server until interrupted."""
    from founders_api.main import run

    print("=" * 70)
    print("FOUNDING MEMBER SPOTS API")
    print("=" * 70)

    try:
        run()
    except KeyboardInterrupt:
        logger.info("Shutdown requested")


if __name__ == "__main__":
    main()
