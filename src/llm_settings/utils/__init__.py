from .http_client import HttpClient, HttpResponse
from .logger import setup_logger

__all__ = ["HttpClient", "HttpResponse", "setup_logger"]
