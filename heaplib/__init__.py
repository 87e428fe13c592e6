__all__ = []

# Modules with subs
from . import ds

# Modules
from . import constants
from . import errors
from . import partition
from . import select
from . import util

__version__ = constants.VERSION
