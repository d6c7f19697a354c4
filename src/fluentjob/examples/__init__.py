"""Ready-made workflow factories showing typical builder usage."""

from .credentials_retrying import CredentialsRetrying

__all__ = ["CredentialsRetrying"]
