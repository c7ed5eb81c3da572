class BilledError(Exception):
    """Base class for errors surfaced to the employee."""


class StoreError(BilledError):
    """The remote bill store failed; the message is shown as-is."""


class FetchError(BilledError):
    """Listing bills failed."""


class SubmitError(BilledError):
    """Creating a bill failed. The draft is kept for another attempt."""


class ReceiptValidationError(BilledError, ValueError):
    """The draft has no accepted receipt file."""


class DraftClosedError(BilledError, RuntimeError):
    """The draft was already submitted."""
