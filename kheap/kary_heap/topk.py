from kheap.kary_heap.kary_max_heap import KAryMaxHeap


def get_topk(heap: KAryMaxHeap, k: int) -> list[int]:
    """
    Function to get the top-K values from a heap.

    The values are popped from a copy, so the given heap is left untouched.

    Parameters
    ----------
    heap : KAryMaxHeap
        A KAryMaxHeap object
    k : int
        The number of 'top-K' values to retrieve.

    Returns
    -------
    list[int]
        The 'top-K' values, largest first. Fewer than ``k`` values are
        returned when the heap holds fewer.
    """
    if k <= 0:
        return []
    if heap.is_empty():
        return []

    scratch = heap.copy()
    return [scratch.pop_max() for _ in range(min(k, len(scratch)))]
