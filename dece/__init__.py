"""Local record store for DECE counseling offices (Gestión DECE)."""

__version__ = "0.26.0"
