"""
Storage — flat-file persistence of transaction records.
"""

from usdc_trail.storage.csv_codec import CSV_COLUMNS, read_transactions_csv, write_transactions_csv

__all__ = ["CSV_COLUMNS", "read_transactions_csv", "write_transactions_csv"]
