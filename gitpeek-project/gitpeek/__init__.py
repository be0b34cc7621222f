# gitpeek: reads the checkout state and branches of a Git repository straight from its .git directory

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = '0.1.0'
