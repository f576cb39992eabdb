from kheap.kary_heap.errors import EmptyHeapError, InvalidChildNumberError
from kheap.kary_heap.kary_max_heap import KAryMaxHeap
from kheap.kary_heap.topk import get_topk
