from tailwind_py.variants.resolver import VariantResolver

__all__ = ["VariantResolver"]
