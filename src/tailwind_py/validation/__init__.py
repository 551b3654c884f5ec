from tailwind_py.validation.rules import ALL_RULES, suggest_fix
from tailwind_py.validation.validator import ValidationError, validate, validate_or_raise

__all__ = ["ALL_RULES", "ValidationError", "suggest_fix", "validate", "validate_or_raise"]
