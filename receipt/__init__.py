"""Receipt parsing: OCR text to structured fields."""
