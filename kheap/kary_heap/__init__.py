from kheap.kary_heap.errors import EmptyHeapError, InvalidChildNumberError
from kheap.kary_heap.kary_max_heap import (
    DEFAULT_CAPACITY,
    DEFAULT_EXPONENT,
    MAX_EXPONENT,
    KAryMaxHeap,
)
