from .adapter import ApiKeyAuth, AuthDecorator, create_auth

__all__ = ["ApiKeyAuth", "AuthDecorator", "create_auth"]
