"""Tests for class validation rules and the validator."""

import pytest

from tailwind_py import Generator
from tailwind_py.errors import TailwindError, UnknownUtility
from tailwind_py.model.diagnostic import Diagnostic, Severity
from tailwind_py.validation import ValidationError, suggest_fix, validate, validate_or_raise
from tailwind_py.validation.rules import (
    check_classes_resolve,
    check_conflicting_utilities,
    check_duplicate_classes,
)


@pytest.fixture(scope="module")
def generator():
    return Generator()


# ---------------------------------------------------------------------------
# check_classes_resolve
# ---------------------------------------------------------------------------


class TestCheckClassesResolve:
    def test_valid_classes(self, generator):
        assert check_classes_resolve(["p-4", "md:hover:bg-blue-500"], generator) == []

    def test_unknown_utility(self, generator):
        diags = check_classes_resolve(["pading-4"], generator)
        assert len(diags) == 1
        diag = diags[0]
        assert diag.rule == "unknown_utility"
        assert diag.severity is Severity.ERROR
        assert diag.class_name == "pading-4"

    def test_typo_suggestion(self, generator):
        diags = check_classes_resolve(["bg-blu-500"], generator)
        assert diags[0].fix == "Did you mean 'bg-blue-500'?"

    def test_unknown_variant_suggestion(self, generator):
        diags = check_classes_resolve(["hovr:p-4"], generator)
        assert diags[0].rule == "unknown_variant"
        assert diags[0].fix == "Did you mean 'hover'?"

    @pytest.mark.parametrize(
        "raw, rule",
        [
            ("w-[13px", "unbalanced_bracket"),
            ("md:lg:p-4", "ambiguous_duplicate_variant"),
            ("p-4/50", "invalid_opacity_modifier"),
            ("w-[1px;color:red]", "malformed_arbitrary_value"),
            ("hover:", "empty_class_string"),
        ],
    )
    def test_error_kinds(self, generator, raw, rule):
        diags = check_classes_resolve([raw], generator)
        assert [d.rule for d in diags] == [rule]
        assert diags[0].fix


class TestSuggestFix:
    def test_no_close_match(self, generator):
        assert suggest_fix(UnknownUtility("zzzzzzzz"), generator) is None


# ---------------------------------------------------------------------------
# Warnings
# ---------------------------------------------------------------------------


class TestWarnings:
    def test_duplicate_class(self, generator):
        diags = check_duplicate_classes(["p-4", "m-2", "p-4"], generator)
        assert len(diags) == 1
        assert diags[0].severity is Severity.WARNING
        assert diags[0].class_name == "p-4"

    def test_conflicting_utilities(self, generator):
        diags = check_conflicting_utilities(["p-4", "p-8"], generator)
        assert len(diags) == 1
        assert diags[0].rule == "conflicting_utilities"
        assert "padding" in diags[0].message

    def test_different_contexts_do_not_conflict(self, generator):
        assert check_conflicting_utilities(["p-4", "md:p-8", "hover:p-2"], generator) == []


# ---------------------------------------------------------------------------
# validate / validate_or_raise
# ---------------------------------------------------------------------------


class TestValidate:
    def test_accepts_class_attribute_string(self, generator):
        assert validate("p-4 md:p-8", generator) == []

    def test_default_generator(self):
        assert validate(["p-4"]) == []

    def test_extra_rules(self, generator):
        def no_important(classes, gen):
            return [
                Diagnostic(rule="no_important", severity=Severity.INFO, message="!", class_name=c)
                for c in classes
                if "!" in c
            ]

        diags = validate(["p-4!"], generator, extra_rules=[no_important])
        assert [d.rule for d in diags] == ["no_important"]

    def test_validate_or_raise(self, generator):
        with pytest.raises(ValidationError) as info:
            validate_or_raise(["p-4", "nope"], generator)
        assert len(info.value.diagnostics) == 1
        assert isinstance(info.value, TailwindError)

    def test_validate_or_raise_returns_warnings(self, generator):
        diags = validate_or_raise(["p-4", "p-4"], generator)
        assert [d.rule for d in diags] == ["duplicate_class"]


class TestDiagnosticStr:
    def test_format(self):
        diag = Diagnostic(
            rule="unknown_utility",
            severity=Severity.ERROR,
            message="Unknown utility 'x'",
            class_name="x",
            fix="Check the name.",
        )
        assert str(diag) == "ERROR [class=x]: Unknown utility 'x' (Check the name.)"
