"""
reportpdf - fill HTML report templates and render them to PDF.
"""

__version__ = "0.1.0"
