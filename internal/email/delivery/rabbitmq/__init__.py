from .handler import EmailHandler

__all__ = ["EmailHandler"]
