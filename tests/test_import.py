"""Verify package imports work correctly."""


def test_import_nesfab_mode() -> None:
    """Test that nesfab_mode can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import nesfab_mode

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert nesfab_mode.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from nesfab_mode import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_names_resolve() -> None:
    """Every name in __all__ is importable from the package root."""
    import nesfab_mode

    for name in nesfab_mode.__all__:
        assert hasattr(nesfab_mode, name), name
