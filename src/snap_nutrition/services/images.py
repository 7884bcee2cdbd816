"""Validation helpers for uploaded food photos."""

import base64

from snap_nutrition.errors import InvalidImage

MAX_IMAGE_BYTES = 10 * 1024 * 1024


def validate_image(
    image_bytes: bytes,
    content_type: str | None = None,
    max_bytes: int = MAX_IMAGE_BYTES,
) -> str:
    """Check an upload and return its MIME type."""
    if not image_bytes:
        raise InvalidImage("Image is empty")
    if len(image_bytes) > max_bytes:
        raise InvalidImage(f"Image exceeds {max_bytes} bytes")
    if content_type and not content_type.lower().startswith("image/"):
        raise InvalidImage(f"Unsupported content type: {content_type}")
    mime_type = detect_mime_type(image_bytes)
    if mime_type is None:
        raise InvalidImage("Unrecognized image format")
    return mime_type


def detect_mime_type(image_bytes: bytes) -> str | None:
    """Infer a basic image MIME type from file signatures."""
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    if image_bytes[:6] in {b"GIF87a", b"GIF89a"}:
        return "image/gif"
    return None


def to_data_url(image_bytes: bytes) -> str:
    """Convert bytes to a base64 data URL for image input."""
    mime_type = detect_mime_type(image_bytes) or "image/jpeg"
    encoded = base64.b64encode(image_bytes).decode("utf-8")
    return f"data:{mime_type};base64,{encoded}"
