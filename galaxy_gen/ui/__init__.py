"""Interactive parameter panel."""

from galaxy_gen.ui.bindings import ParameterBinding, build_bindings

__all__ = ["ParameterBinding", "build_bindings"]
