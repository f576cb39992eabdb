class EmptyHeapError(RuntimeError):
    """Raised when querying or removing from a heap with no elements."""


class InvalidChildNumberError(ValueError):
    """
    Raised when a child number falls outside ``[1, branching_factor]``.

    Parameters
    ----------
    child_number : int
        The offending 1-indexed child number.
    branching_factor : int
        The maximum number of children per node of the heap that raised.
    """

    def __init__(self, child_number: int, branching_factor: int) -> None:
        self.child_number = child_number
        self.branching_factor = branching_factor
        super().__init__(
            f"Invalid child number {child_number}: must be between 1 and "
            f"{branching_factor} (the branching factor)"
        )
