# This file makes the 'commands' directory a Python package
# Importing command modules from here

from . import state
from . import revision
from . import branch
from . import branches
from . import status
