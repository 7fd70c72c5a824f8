"""DAO voting building blocks: decision curves, fixed-point helpers, records and an in-memory environment."""

__version__ = "0.1.0"

__all__ = ["curve", "datas", "env", "fixed", "subnet"]