def clean_text(value):
    """Trim a string; empty strings become None"""
    if value is None:
        return None

    # Convert to string
    text = str(value).strip()

    return text or None
