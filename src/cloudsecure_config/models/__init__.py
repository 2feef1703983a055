"""Data models for cloudsecure_config."""

from .config import CloudSecureConfig, CredentialProfile, SECRET_MASK

__all__ = [
    "CloudSecureConfig",
    "CredentialProfile",
    "SECRET_MASK",
]
