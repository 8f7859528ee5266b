"""Reporting over the variant timing harness output."""
