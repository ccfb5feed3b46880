# -*- coding: utf-8 -*-
"""Exceptions raised by the BEP generator services and repositories."""


class ApiException(Exception):
    """Non-2xx response from WorkflowMax or the identity provider."""

    def __init__(self, message: str, status_code: int = None,
                 response_data: dict = None, context: str = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_data = response_data or {}
        self.context = context

    def __str__(self):
        if self.status_code:
            return f"[{self.status_code}] {self.message}"
        return self.message


class AuthorizationError(ApiException):
    """Not connected to WorkflowMax, or the access token was rejected."""

    def __init__(self, message: str = "Not authorized. Please connect to WorkflowMax first.",
                 status_code: int = None, response_data: dict = None,
                 context: str = None):
        super().__init__(message, status_code, response_data, context)


class ReadOnlyViolationError(ApiException):
    """A non-GET request was attempted against the read-only integration."""

    def __init__(self, method: str, endpoint: str = None, context: str = None):
        message = (
            f"Only GET requests are allowed. This integration is read-only. "
            f"(attempted {method.upper()})"
        )
        super().__init__(message, status_code=None, response_data=None, context=context)
        self.method = method.upper()
        self.endpoint = endpoint


class ValidationException(Exception):
    """A loaded value falls outside its closed set."""

    def __init__(self, message: str, field: str = None,
                 errors: list = None, context: str = None):
        super().__init__(message)
        self.message = message
        self.field = field
        self.errors = errors or []
        self.context = context


class NetworkException(Exception):
    """Transport failure (connection, timeout) talking to an HTTP endpoint."""

    def __init__(self, message: str, original_error: Exception = None,
                 context: str = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error
        self.context = context

    def __str__(self):
        if self.context:
            return f"{self.message} ({self.context})"
        return self.message


class StorageException(Exception):
    """Persisted data under a key could not be read back."""

    def __init__(self, message: str, key: str = None,
                 original_error: Exception = None):
        super().__init__(message)
        self.message = message
        self.key = key
        self.original_error = original_error

    def __str__(self):
        if self.key:
            return f"{self.message} (key: {self.key})"
        return self.message
