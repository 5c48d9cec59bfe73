import requests
from cloudinary import exceptions as cloudinary_exceptions


class AssetStoreError(Exception):
    """
    Base class for failures talking to the asset store.

    Attributes:
        key (str): The logical key the operation was working on, if any.
        cause (Exception): The underlying SDK or transport exception.
    """

    def __init__(self, message: str, key: str = None, cause: Exception = None):
        super().__init__(message)
        self.key = key
        self.cause = cause


class ResourceNotFound(AssetStoreError):
    pass


class AccessDenied(AssetStoreError):
    pass


class RemoteServiceError(AssetStoreError):
    pass


class TransportError(AssetStoreError):
    pass


def _http_status(exc: requests.RequestException):
    response = getattr(exc, "response", None)
    return getattr(response, "status_code", None)


def translate_error(exc: Exception, key: str = None) -> AssetStoreError:
    """
    Maps an exception raised by the Cloudinary SDK or by requests onto the
    AssetStoreError hierarchy. Already translated errors are returned as is.
    """
    if isinstance(exc, AssetStoreError):
        return exc

    message = str(exc) or exc.__class__.__name__

    if isinstance(exc, cloudinary_exceptions.NotFound):
        return ResourceNotFound(message, key=key, cause=exc)
    if isinstance(exc, (cloudinary_exceptions.AuthorizationRequired, cloudinary_exceptions.NotAllowed)):
        return AccessDenied(message, key=key, cause=exc)
    if isinstance(exc, cloudinary_exceptions.Error):
        return RemoteServiceError(message, key=key, cause=exc)

    if isinstance(exc, requests.HTTPError):
        status = _http_status(exc)
        if status == 404:
            return ResourceNotFound(message, key=key, cause=exc)
        if status in (401, 403):
            return AccessDenied(message, key=key, cause=exc)
        return TransportError(message, key=key, cause=exc)
    if isinstance(exc, requests.RequestException):
        return TransportError(message, key=key, cause=exc)

    return AssetStoreError(message, key=key, cause=exc)
