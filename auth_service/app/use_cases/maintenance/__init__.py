"""
Maintenance Use Cases
"""

from .purge_revoked_tokens_use_case import PurgeRevokedTokensResponse, PurgeRevokedTokensUseCase

__all__ = ["PurgeRevokedTokensUseCase", "PurgeRevokedTokensResponse"]
