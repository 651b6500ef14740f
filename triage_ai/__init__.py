"""Rate-limited LLM ticket classification service."""

__version__ = "0.1.0"
