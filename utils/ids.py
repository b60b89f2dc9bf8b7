import secrets

ID_LENGTH = 8


def generate_id(length: int = ID_LENGTH) -> str:
    """Short random URL-safe identifier (A-Z, a-z, 0-9, '-', '_')."""
    # token_urlsafe yields at least one character per byte; keep the first length
    return secrets.token_urlsafe(length)[:length]
