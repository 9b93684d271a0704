"""
Cadastre - Program-derived address graph for the Xyber launch programs.

Computes the deterministic Solana account addresses a token launch needs
without storing them.
"""

__version__ = "0.1.0"
