"""Top-level package for the page geometry toolkit.

Provides subpackages:
- pager_toolkit.core – immutable value types shared by every module
- pager_toolkit.units – length expression conversion to millimetres
- pager_toolkit.layout – float-margin map, margin state stack and the pager
- pager_toolkit.output – drawing surface contract and the ReportLab surface
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"

    if pyproject.exists():
        try:
            content = pyproject.read_text()
        except OSError:
            content = ""
        for line in content.splitlines():
            if line.strip().startswith("version"):
                # Parse: version = "0.3.0"
                return line.split("=")[1].strip().strip('"').strip("'")

    # Fallback to importlib.metadata for installed package
    from importlib.metadata import PackageNotFoundError, version as pkg_version
    try:
        return pkg_version("pager_toolkit")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()
__copyright__ = "Copyright 2026 pager_toolkit contributors"
__all__: list[str] = ["__version__", "__copyright__"]
