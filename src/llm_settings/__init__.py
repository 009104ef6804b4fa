"""Settings and model discovery for a pluggable LLM backend."""

__version__ = "0.1.0"
