from . import max_heap
from . import order
