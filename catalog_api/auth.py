import hmac
from functools import wraps

from flask import current_app, request

from catalog_api.errors import AuthError
from catalog_api.logger import logger


class TokenValidator:
    """Checks ``Authorization: Bearer <token>`` headers against one shared secret."""

    def __init__(self, token):
        self.api_token = token or ""

    def is_valid_token(self, header):
        """Return True only when the header carries the configured token.

        Missing headers, malformed values and an unset secret are all invalid;
        this never raises.
        """
        try:
            token = header.split()[1]
        except (AttributeError, IndexError):
            return False
        if not token or not self.api_token:
            return False
        return hmac.compare_digest(token.encode("utf-8"), self.api_token.encode("utf-8"))


class TokenAuth:
    """Flask extension holding the app's TokenValidator."""

    def __init__(self, app=None):
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        app.extensions["token_auth"] = TokenValidator(app.config.get("API_TOKEN", ""))

    @property
    def validator(self):
        return current_app.extensions["token_auth"]

    def required(self, func):
        """Decorator: reject the request with 401 before the view runs."""
        @wraps(func)
        def wrapper(*args, **kwargs):
            if not self.validator.is_valid_token(request.headers.get("Authorization")):
                logger.warning(f"[{func.__name__}] Invalid token from {request.remote_addr}")
                raise AuthError()
            return func(*args, **kwargs)
        return wrapper
