class HilbertError(Exception):
    """Base class for curve construction errors."""

class InvalidOrder(HilbertError, ValueError):
    def __init__(self, order, min_order: int, max_order: int):
        super().__init__(f"Curve order must be an integer in [{min_order}, {max_order}], got {order!r}")
        self.order = order

class AllocationFailure(HilbertError, MemoryError):
    pass
