"""Find social media links, rewrite them to embed-friendly mirrors, and build chat bot payloads."""

__version__ = "1.0.0"

__all__ = ["models", "database", "urls", "cache", "settings", "credits", "sanitize_command"]