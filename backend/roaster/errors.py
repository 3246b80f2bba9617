"""Exception types shared by the roast pipeline, wallet and ledger layers."""


class RoastError(Exception):
    """Base class for roast service errors."""


class ValidationError(RoastError):
    """Submission rejected before any generation work starts."""


class UpstreamGenerationFailure(RoastError):
    """The remote text-generation call failed, timed out or returned nothing."""


class WalletUnavailable(RoastError):
    """No wallet extension is available to the caller."""

    def __init__(self, install_url: str, message: str = "Phantom wallet not installed"):
        super().__init__(message)
        self.install_url = install_url


class WalletRejected(RoastError):
    """The user rejected the wallet prompt, or it never answered."""


class LedgerOperationFailure(RoastError):
    """Any failure talking to the Solana RPC or building a transaction."""
