from urllib.parse import quote


def segment(value) -> str:
    """Quote a single path segment, slashes included."""
    return quote(str(value), safe="")
