"""
Mini-Ada Command-Line Interface
===============================

This package provides the command-line tools for Mini-Ada:

- **adascan**: scan a source file and print its token stream

Each tool is implemented as a Click-based CLI application with
help text and consistent exit codes (see cli.errors.ExitCode).
"""

__all__ = ["adascan"]
