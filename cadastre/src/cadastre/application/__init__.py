"""Application layer for Cadastre."""
