"""Wallet session adapters."""

from cadastre.infrastructure.auth.wallet_session import WalletSession

__all__ = ["WalletSession"]
