# File: writers/__init__.py
# Purpose: Writers module init

"""
File format writers
"""

__all__ = [
    'directx_writer',
    'java_writer',
    'audit_writer',
]
