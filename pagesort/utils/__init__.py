"""
Utils module - Shared utilities for pagesort

- io_helpers: BOM-safe UTF-8 reading and writing
- text_processing: text <-> label list conversion
- logging_helper: Consistent logging setup
- paths: Common path definitions
"""
