"""
Corpus discovery: recursively find candidate files under a root directory.
"""

from pathlib import Path


def discover(root: Path, suffix: str = ".md") -> list[Path]:
    """
    Find all regular files under root whose name ends with suffix.

    Args:
        root: Directory to walk (or a single file)
        suffix: Filename suffix filter ("" matches everything)

    Returns:
        Matching file paths, sorted for reproducible runs

    Raises:
        FileNotFoundError: If root does not exist
    """
    root = Path(root)
    if not root.exists():
        raise FileNotFoundError(f"Corpus root not found: {root}")

    if root.is_file():
        return [root] if root.name.endswith(suffix) else []

    return sorted(
        path for path in root.rglob("*")
        if path.is_file() and path.name.endswith(suffix)
    )
