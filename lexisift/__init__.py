import logging
import sys

# Check that we're not running on an unsupported Python version.
if sys.version_info < (3, 11):
    print("lexisift requires Python 3.11 or above.")
    sys.exit(1)

__version__ = "0.1.0"

logger = logging.getLogger(__name__)


def run():
    try:
        from . import main

        sys.exit(main.main())
    except ImportError as e:
        print("Unable to import lexisift.main:", e)
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Bye!")
