import logging

import numpy as np

from kheap import KAryMaxHeap, get_topk

logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

rng = np.random.default_rng(42)

# Create a 4-ary heap (exponent=2)
print("Creating 4-ary heap...")
heap = KAryMaxHeap(2)
heap.insert(1)
heap.show_heap()

for i, value in enumerate(rng.integers(0, 1000, size=100)):
    heap.insert(int(value))
    if i % 10 == 0 and i > 0:
        heap.show_heap()
    if i % 20 == 0 and i > 0:
        print(f"Popped element - {heap.pop_max()}")
        print("After popping")
        heap.show_heap()
        print()

print(f"Heap size: {len(heap)}")
print(f"Capacity: {heap.capacity}")
print(f"Branching factor: {heap.branching_factor}")
print(f"Top 5: {get_topk(heap, 5)}")
