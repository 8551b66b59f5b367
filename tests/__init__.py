"""
Attachment Renamer Test Suite
File: tests/__init__.py

Test modules for name templates, duplicate resolution and rename operations.
"""

__all__ = [
    'test_template_engine',
    'test_date_format',
    'test_deduplication',
    'test_sanitizer',
    'test_scanner',
    'test_settings',
    'test_document',
    'test_name_generator',
    'test_storage',
    'test_operations',
    'test_cli',
    'run_tests'
]
