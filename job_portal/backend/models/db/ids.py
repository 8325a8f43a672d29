import secrets


def new_object_id() -> str:
    """24-character hex identifier in the style of a document-store object id."""
    return secrets.token_hex(12)
