"""
Application document generation.

Builds state-specific view models for applications, renders them through
their templates and converts the result to PDF.
"""

from .generator import PdfApplicationDocumentGenerator, build_default_generator

__all__ = ['PdfApplicationDocumentGenerator', 'build_default_generator']
