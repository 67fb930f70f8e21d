"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class ValidationError(Exception):
    """Raised when required article text is missing or blank."""

    def __init__(self, fields: list[str], message: str = "Title, brief, and article are required."):
        self.fields = fields
        self.message = message
        super().__init__(message)


class UnsupportedMediaTypeError(Exception):
    """Raised when an uploaded file is not an image."""

    def __init__(self, content_type: str | None):
        self.content_type = content_type
        super().__init__("Only image uploads are allowed")


class PayloadTooLargeError(Exception):
    """Raised when an uploaded file exceeds the size ceiling."""

    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(f"File too large. Maximum size is {limit // (1024 * 1024)}MB.")


class UnexpectedUploadError(Exception):
    """Raised when a write request carries files other than a single image part."""

    def __init__(self, fields: list[str], expected: str = "image"):
        self.fields = fields
        self.expected = expected
        super().__init__(f"Only one file may be uploaded, in the '{expected}' field.")
