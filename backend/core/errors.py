"""Error taxonomy shared by the catalog, the explorer service and the API layer."""


class ExplorerError(Exception):
    """Base class; `status_code` is the HTTP status the API layer answers with."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class CatalogError(ExplorerError):
    """Schema introspection failed. Fatal at startup."""


class NotFound(ExplorerError):
    status_code = 404


class BadRequest(ExplorerError):
    status_code = 400


class DatabaseError(ExplorerError):
    status_code = 500


def invalid_field(name: str) -> BadRequest:
    return BadRequest(f"field {name} have invalid type")
