"""
vitae - guided résumé drafting with multi-template PDF and DOCX export

A session-scoped résumé engine: a wizard builds the draft step by step, the
draft is scored continuously, and the finished document is exported across
visual templates, photo variants and formats.

Architecture:
- Drafting Context: Draft data model, mutations, scoring, step gating
- Rendering Context: Template/variant resolution, template rendering, PDF encoding
- Exporting Context: DOCX encoding, photo intake, export orchestration
"""

__version__ = "0.1.0"
