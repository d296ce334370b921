"""nubemdom: household receipt digitization.

Turns OCR text from receipt photos into structured, categorized records.
"""

__version__ = "1.0.0"
