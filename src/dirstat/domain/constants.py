from __future__ import annotations

"""
Domain Constants.

Program identity strings shared by the version flags and the package metadata.
"""

PROGNAME = "dirstat"
VERSION = "0.1.0"
AUTHOR = "Walter G Davies"
RELEASE_DATE = "2024-11-02"
