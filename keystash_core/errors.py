from __future__ import annotations


class KeystashError(Exception):
    pass


class ProfileNotFoundError(KeystashError):
    """Raised by write paths that refuse to create a profile on their own."""

    def __init__(self, pubkey: str):
        self.pubkey = pubkey
        super().__init__(f"Profile does not exist {pubkey}")


class InvalidPolicyError(KeystashError, ValueError):
    pass


class UnknownCapabilityError(KeystashError, KeyError):
    def __init__(self, method: str):
        self.method = method
        super().__init__(method)

    def __str__(self) -> str:
        return f"Unknown capability: {self.method}"
