"""Small helpers for embedded tooling: bit checks, buffer filling, guards, iterators, memory regions and XMODEM parsing."""

__version__ = "0.1.0"
__all__ = ["bitwise", "buffer", "guard", "iterator", "memory", "xmodem"]