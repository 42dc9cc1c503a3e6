"""Small string helpers shared by the converters."""


def replace_whitespaces(s: str, replacement: str = "_") -> str:
    """Return ``s`` with every space replaced by ``replacement``."""
    return s.replace(" ", replacement)