"""Risk evaluation domain exceptions."""

from .base import DomainException


class InvalidWalletAddressException(DomainException):
    """Raised when a wallet address is not a valid Stellar public key."""

    def __init__(self, wallet_address: str):
        super().__init__(
            message=(
                f'Invalid wallet address: "{wallet_address}". '
                "Must start with 'G' and be 56 alphanumeric characters."
            ),
            code="INVALID_WALLET_ADDRESS",
        )
        self.wallet_address = wallet_address
