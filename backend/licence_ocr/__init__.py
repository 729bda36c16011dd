"""Field extraction for OCR transcripts of Moroccan driving licences."""

__version__ = "0.1.0"
