"""Spreadsheet-driven paginated report generator.

Reads identifiers from the 4th column of a workbook, synthesizes pages of
biased random rows keyed to them and renders the result into a .docx template.
"""

__version__ = "1.0.0"
