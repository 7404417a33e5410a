"""
color_survey_codegen
====================

Does: Root package initializer for the color survey code generator.
Returns: Exposes subpackages (`color`, `survey`, `render`, `utils`) and the pipeline
         through a stable namespace.
Used by: The `color-codegen` CLI and library callers importing `color_survey_codegen.*`.
"""

__all__: list[str] = []
__docformat__ = "google"
__version__ = "0.1.0"
