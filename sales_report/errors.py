class ReportError(Exception):
    """Base class for failures raised while building a sales report."""


class InvalidDateError(ReportError, ValueError):
    """A record's date could not be turned into a calendar month."""

    def __init__(self, index: int, sku: str):
        self.index = index
        self.sku = sku
        super().__init__(f"Record #{index} (SKU {sku!r}) has no parseable date.")


class EmptyGroupError(ReportError):
    """No rows matched the SKU whose order statistics were requested."""

    def __init__(self, month, sku: str):
        self.month = month
        self.sku = sku
        super().__init__(f"No orders for SKU {sku!r} in {month}; cannot compute statistics.")
