from . import ads, analytics, health, publishing

__all__ = ["ads", "analytics", "health", "publishing"]
