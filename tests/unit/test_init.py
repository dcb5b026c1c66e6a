"""Test the main package initialization."""


def test_import_main_package() -> None:
    """Test that the main package can be imported without errors."""
    import syntaxe

    assert syntaxe.__version__ == "0.1.0"


class TestPackageStructure:
    """Test the package structure and imports."""

    def test_core_module_import(self) -> None:
        """Test that core module can be imported."""
        from syntaxe import core  # noqa: F401

    def test_engine_module_import(self) -> None:
        """Test that engine module can be imported."""
        from syntaxe import engine  # noqa: F401

    def test_builtins_module_import(self) -> None:
        """Test that builtins module can be imported."""
        from syntaxe import builtins  # noqa: F401

    def test_cli_module_import(self) -> None:
        """Test that CLI module can be imported."""
        from syntaxe import cli  # noqa: F401

    def test_default_engine_has_builtins(self) -> None:
        """The process-wide engine is shared and knows the built-in kinds."""
        from syntaxe import get_engine

        assert get_engine() is get_engine()
        assert "string" in get_engine().registry.validator_kinds()
        assert "xss" in get_engine().registry.encoder_kinds()

    def test_module_level_entry_points(self) -> None:
        """validate/validate_and_throw/encode delegate to the default engine."""
        import pytest

        from syntaxe import ValidationException, encode, validate, validate_and_throw
        from tests.fixtures.models import Account, Post

        assert validate(Account(name="ab")) == ["name must be at least 3 characters"]
        with pytest.raises(ValidationException):
            validate_and_throw(Account(name=""))

        post = Post(title="<b>")
        encode(post)
        assert post.title == "&lt;b&gt;"
