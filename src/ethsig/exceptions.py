class RecoveryError(ValueError):
    """Public key cannot be recovered from the signature and digest"""


class RLPDecodingError(ValueError):
    """Input is not a well-formed RLP item"""
