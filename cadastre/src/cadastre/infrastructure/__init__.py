"""Infrastructure layer for Cadastre."""
