"""
Errori applicativi. Ogni errore porta il proprio status HTTP; l'handler
registrato in main.py li converte in {"error": messaggio}.
"""


class ContentError(Exception):
    status_code = 500


class StorageError(ContentError):
    """Query o scrittura file fallita."""

    status_code = 500


class MissingUploadError(ContentError):
    status_code = 400


class MissingFieldError(ContentError):
    status_code = 400


class UnknownFieldError(ContentError):
    status_code = 400


class NotFoundError(ContentError):
    status_code = 404
