"""Domain layer for Cadastre."""
