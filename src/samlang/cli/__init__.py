"""
SAM Command-Line Interface
==========================

This package provides the command-line tools of the SAM toolchain:

- **samlex**: token dump for SAM source files

Each tool is a Click application with help text and consistent exit codes.
"""

__all__ = ["samlex"]
