"""Dependency injection for Cadastre."""

from cadastre.di.container import DIContainer

__all__ = ["DIContainer"]
