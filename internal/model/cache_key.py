"""Cache key builders. Every key the service writes goes through here."""

from .constant import *


def github_user(username: str) -> str:
    return f"{KEY_GITHUB_USER}:{username}"


def github_repos(username: str) -> str:
    return f"{KEY_GITHUB_REPOS}:{username}"


def system_status() -> str:
    return KEY_SYSTEM_STATUS


def contact_rate(identity: str) -> str:
    return f"{KEY_CONTACT_RATE}:{identity}"


def analytics(date: str) -> str:
    """Daily summary key, date as YYYY-MM-DD."""
    return f"{KEY_ANALYTICS}:{date}"


__all__ = ["github_user", "github_repos", "system_status", "contact_rate", "analytics"]
