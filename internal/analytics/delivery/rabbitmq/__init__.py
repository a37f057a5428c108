from .handler import AnalyticsHandler

__all__ = ["AnalyticsHandler"]
