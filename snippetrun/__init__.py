"""
snippetrun - extract, compile and run code snippets embedded in documentation.
"""

__version__ = "0.1.0"
