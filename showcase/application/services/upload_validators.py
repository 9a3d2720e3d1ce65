"""
Upload input validation.

The filename is used verbatim as the S3 object key and the document id,
so it must stay inside a flat key namespace.

Dependencies: showcase.core.exceptions
System role: Upload request validation
"""

from showcase.core.exceptions import ValidationError

MAX_FILENAME_LENGTH = 255


def require_filename(filename: str | None) -> str:
    """
    Return the filename stripped of surrounding whitespace.

    Raises:
        ValidationError: If filename is missing or blank
    """
    if filename is None or not filename.strip():
        raise ValidationError("Filename is required", field="filename")
    return filename.strip()


def validate_filename(filename: str | None) -> str:
    """
    Validate a filename that will become an object key.

    Args:
        filename: Original filename from the client

    Returns:
        str: The validated filename

    Raises:
        ValidationError: If filename is missing, too long, or escapes the key namespace
    """
    filename = require_filename(filename)

    if len(filename) > MAX_FILENAME_LENGTH:
        raise ValidationError("Invalid filename length", field="filename")

    # Separators and dot-only names would leave the flat key namespace
    if filename in (".", "..") or "/" in filename or "\\" in filename:
        raise ValidationError(
            "Invalid filename: path traversal detected", field="filename"
        )

    return filename


def validate_content_type(content_type: str | None) -> str:
    """
    Validate the MIME type the client will upload with.

    Raises:
        ValidationError: If content type is missing or not of the form type/subtype
    """
    if content_type is None or not content_type.strip():
        raise ValidationError("Content type is required", field="contentType")

    content_type = content_type.strip()
    if "/" not in content_type:
        raise ValidationError(
            f"Invalid content type: {content_type}", field="contentType"
        )
    return content_type
