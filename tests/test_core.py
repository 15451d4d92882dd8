"""Tests for core label validation and the Babel compatibility layer."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ordergraph.core import is_valid_label, require_label
from ordergraph.core import babel_compat
from ordergraph.core.babel_compat import (
    BabelImportError,
    get_babel_numbers,
    require_babel,
)
from ordergraph.diagnostics import DiagnosticCode, InvalidArgumentError


class TestLabelValidation:
    """is_valid_label / require_label."""

    @pytest.mark.parametrize("label", ["a", " ", "compile-all", "ünïcödé"])
    def test_valid(self, label: str) -> None:
        """Any non-empty string is a label."""
        assert is_valid_label(label)
        assert require_label(label) is label

    @pytest.mark.parametrize("label", [None, "", 0, ["a"]])
    def test_invalid(self, label: object) -> None:
        """None, empty and non-strings are rejected."""
        assert not is_valid_label(label)
        with pytest.raises(InvalidArgumentError) as exc_info:
            require_label(label)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.INVALID_LABEL

    @given(label=st.text(min_size=1))
    def test_nonempty_text_always_valid(self, label: str) -> None:
        """PROPERTY: every non-empty string passes."""
        assert require_label(label) == label


class TestBabelCompat:
    """Optional Babel access."""

    def test_missing_babel_raises_with_install_hint(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Without Babel, accessors raise BabelImportError naming the extra."""
        monkeypatch.setattr(babel_compat, "_check_babel_available", lambda: False)
        with pytest.raises(BabelImportError, match=r"ordergraph\[babel\]") as exc_info:
            get_babel_numbers()
        assert exc_info.value.feature == "get_babel_numbers"

    def test_require_babel_feature_name(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """The feature name appears in the message."""
        monkeypatch.setattr(babel_compat, "_check_babel_available", lambda: False)
        with pytest.raises(BabelImportError, match="report numbering"):
            require_babel("report numbering")

    def test_babel_error_is_import_error(self) -> None:
        """Callers catching ImportError also catch BabelImportError."""
        assert issubclass(BabelImportError, ImportError)

    def test_numbers_module_when_installed(self) -> None:
        """With Babel installed, the numbers module formats decimals."""
        pytest.importorskip("babel")
        numbers = get_babel_numbers()
        assert numbers.format_decimal(1234, locale="en_US") == "1,234"


class TestPackageExports:
    """Top-level package surface."""

    def test_docstring_lists_every_function_export(self) -> None:
        """Each exported public function is named in the package docstring."""
        import ordergraph  # noqa: PLC0415

        assert ordergraph.__doc__ is not None
        for name in ordergraph.__all__:
            if name.islower() and not name.startswith("_"):
                assert f"    {name} - " in ordergraph.__doc__, name
