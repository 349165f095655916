"""Object-oriented socket wrappers with string masking and tokenising helpers."""

__version__ = "0.1.0"

__all__ = ["base", "connections", "inet", "ipx", "local", "mask", "text", "tokens", "transport"]