# Constants

import sys

# Version
VERSION_MAJOR = 1
VERSION_MINOR = 0
VERSION_RELEASE = 0

VERSION = f'{VERSION_MAJOR}.{VERSION_MINOR}.{VERSION_RELEASE}'

# Default number of storage slots for a new heap
DEFAULT_CAPACITY = 10

# Storage doubles below this capacity and grows by half at or above it
GROWTH_DOUBLE_LIMIT = 64

# Largest storage size a heap may grow to
MAX_ARRAY_SIZE = sys.maxsize - 8
