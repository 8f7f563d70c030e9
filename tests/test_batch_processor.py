"""
Tests for the batch processor: batching, progress reporting, error
handling, JSON loading and DataFrame export.
"""

import json
import os
import shutil
import tempfile
import unittest

import pandas as pd

from autocat_batch_processor import (
    AutoCatBatchProcessor,
    BatchResult,
    BatchStats,
    InvalidTransactionError,
    main,
)
from autocat_engine.categorisation.models import TransactionInput


def sample_transactions():
    """A small mixed batch of transaction dicts."""
    return [
        {"id": "t1", "amount": -45.0, "description": "POS SCREWFIX IRELAND", "direction": "expense",
         "user_industry": "carpentry_joinery", "date": "2024-03-01"},
        {"id": "t2", "amount": -12.99, "description": "SPOTIFY PREMIUM", "direction": "expense"},
        {"id": "t3", "amount": 1500.0, "description": "LODGEMENT", "direction": "income"},
        {"id": "t4", "amount": -80.0, "description": "RANDOM UNKNOWN VENDOR XYZ123", "direction": "expense"},
        {"id": "t5", "amount": -60.0, "description": "MAXOL STATION", "direction": "expense"},
    ]


class TestProcessBatch(unittest.TestCase):
    """Test process_batch."""

    def setUp(self):
        """Set up test fixtures."""
        self.processor = AutoCatBatchProcessor(batch_size=2)

    def test_all_successful(self):
        """Test a clean batch categorises every transaction in order."""
        batch = self.processor.process_batch(sample_transactions())

        self.assertEqual(batch.stats.total_transactions, 5)
        self.assertEqual(batch.stats.successful, 5)
        self.assertEqual(batch.stats.failed, 0)
        self.assertEqual([item.index for item in batch.results], [0, 1, 2, 3, 4])
        self.assertEqual(batch.results[0].result.category, "Materials")
        self.assertEqual(batch.stats.success_rate, 100.0)

    def test_outcome_counts(self):
        """Test business, personal and undetermined outcomes are counted."""
        stats = self.processor.process_batch(sample_transactions()).stats

        # Screwfix and the lodgement are business, Spotify personal
        self.assertEqual(stats.business, 2)
        self.assertEqual(stats.personal, 1)
        self.assertEqual(stats.undetermined, 2)
        self.assertEqual(stats.business + stats.personal + stats.undetermined, stats.successful)
        self.assertGreater(stats.needs_review, 0)
        self.assertGreater(stats.average_confidence, 0)

    def test_progress_after_each_batch(self):
        """Test progress is reported once per batch with cumulative counts."""
        calls = []

        self.processor.process_batch(
            sample_transactions(), progress_callback=lambda current, total, message: calls.append((current, total))
        )

        self.assertEqual(calls, [(2, 5), (4, 5), (5, 5)])

    def test_accepts_transaction_inputs(self):
        """Test TransactionInput objects pass straight through."""
        tx = TransactionInput(-30.0, "QUARTERLY FEE", "expense")

        batch = self.processor.process_batch([tx])

        self.assertIs(batch.results[0].transaction, tx)
        self.assertEqual(batch.results[0].result.category, "Bank fees")

    def test_errors_do_not_stop_batch(self):
        """Test bad rows are recorded and the rest still processed."""
        transactions = sample_transactions() + [
            {"id": "bad1", "description": "NO AMOUNT", "direction": "expense"},
            {"id": "bad2", "amount": "abc", "description": "BAD AMOUNT", "direction": "expense"},
            {"amount": -5.0, "description": "BAD DIRECTION", "direction": "sideways"},
            "not a transaction",
        ]

        batch = self.processor.process_batch(transactions)

        self.assertEqual(batch.stats.successful, 5)
        self.assertEqual(batch.stats.failed, 4)
        self.assertEqual(batch.stats.processed, 9)
        self.assertEqual(batch.error_summary, {"MISSING_DATA": 1, "DATA_VALIDATION_ERROR": 3})

        refs = [error.transaction_ref for error in batch.errors]
        self.assertEqual(refs, ["bad1", "bad2", "transaction 7", "transaction 8"])
        self.assertIn("amount", batch.errors[0].error_message)

    def test_unexpected_error(self):
        """Test an unexpected exception becomes a PROCESSING_ERROR."""
        class BrokenCategoriser:
            def categorise(self, tx, vendor_cache=None, user_corrections=None):
                raise RuntimeError("boom")

        processor = AutoCatBatchProcessor(categoriser=BrokenCategoriser())

        batch = processor.process_batch(sample_transactions()[:1])

        self.assertEqual(batch.errors[0].error_type, "PROCESSING_ERROR")
        self.assertEqual(batch.errors[0].error_message, "RuntimeError: boom")

    def test_empty_batch(self):
        """Test an empty list gives empty stats."""
        batch = self.processor.process_batch([])

        self.assertEqual(batch.stats.total_transactions, 0)
        self.assertEqual(batch.stats.success_rate, 0.0)
        self.assertEqual(batch.stats.average_confidence, 0.0)

    def test_invalid_batch_size(self):
        """Test batch sizes below 1 are rejected."""
        with self.assertRaises(ValueError):
            AutoCatBatchProcessor(batch_size=0)


class TestJSONLoading(unittest.TestCase):
    """Test JSON parsing and process_json."""

    def setUp(self):
        """Set up test fixtures."""
        self.processor = AutoCatBatchProcessor()

    def test_list_payload(self):
        """Test a bare list of transactions is accepted."""
        content = json.dumps(sample_transactions()).encode("utf-8")

        self.assertEqual(len(AutoCatBatchProcessor.load_transactions_from_json(content)), 5)

    def test_wrapped_payload(self):
        """Test an object with a transactions list is accepted."""
        content = json.dumps({"transactions": sample_transactions()}).encode("utf-8")

        batch = self.processor.process_json("upload.json", content)

        self.assertEqual(batch.stats.successful, 5)

    def test_cp1252_fallback(self):
        """Test Windows-encoded bytes are decoded."""
        content = '[{"amount": -5, "description": "CAFÉ œuvre", "direction": "expense"}]'.encode("cp1252")

        data = AutoCatBatchProcessor.load_transactions_from_json(content)

        self.assertEqual(data[0]["description"], "CAFÉ œuvre")

    def test_invalid_json(self):
        """Test malformed JSON is reported as a file error."""
        batch = self.processor.process_json("upload.json", b"{not json")

        self.assertEqual(batch.error_summary, {"JSON_PARSE_ERROR": 1})
        self.assertEqual(batch.errors[0].transaction_ref, "upload.json")
        self.assertEqual(batch.results, [])

    def test_wrong_structure(self):
        """Test JSON without a transaction list is rejected."""
        batch = self.processor.process_json("upload.json", b'{"items": []}')

        self.assertEqual(batch.error_summary, {"INVALID_JSON_STRUCTURE": 1})
        with self.assertRaises(InvalidTransactionError):
            AutoCatBatchProcessor.load_transactions_from_json(b'"just a string"')


class TestMergeResults(unittest.TestCase):
    """Test BatchResult.merge_results."""

    def test_merge(self):
        """Test counts, results and error summaries are combined."""
        processor = AutoCatBatchProcessor()
        first = processor.process_batch(sample_transactions()[:2])
        second = processor.process_batch(sample_transactions()[2:] + [{"id": "x", "direction": "expense"}])

        merged = BatchResult.merge_results(first, second)

        self.assertEqual(merged.stats.total_transactions, 6)
        self.assertEqual(merged.stats.successful, 5)
        self.assertEqual(len(merged.results), 5)
        self.assertEqual(merged.error_summary, {"MISSING_DATA": 1})
        self.assertEqual(merged.stats.start_time, first.stats.start_time)
        self.assertEqual(merged.stats.end_time, second.stats.end_time)

    def test_merge_empty_stats(self):
        """Test merging results without timings."""
        empty = BatchResult(stats=BatchStats(), results=[], errors=[])

        merged = BatchResult.merge_results(empty, empty)

        self.assertIsNone(merged.stats.start_time)
        self.assertEqual(merged.stats.processing_time, 0.0)


class TestExport(unittest.TestCase):
    """Test DataFrame and CSV export."""

    def setUp(self):
        """Set up test fixtures."""
        self.processor = AutoCatBatchProcessor()
        self.temp_dir = tempfile.mkdtemp()

    def tearDown(self):
        """Clean up temporary files."""
        shutil.rmtree(self.temp_dir)

    def test_results_dataframe(self):
        """Test each result becomes one row with readable columns."""
        batch = self.processor.process_batch(sample_transactions())

        df = self.processor.results_to_dataframe(batch.results)

        self.assertEqual(len(df), 5)
        self.assertIn("VAT Deductible", df.columns)
        self.assertEqual(df.iloc[0]["Category"], "Materials")
        self.assertEqual(df.iloc[0]["Date"], "2024-03-01")
        self.assertEqual(df.iloc[1]["Business Expense"], "personal")

    def test_errors_dataframe(self):
        """Test errors export with their type and message."""
        batch = self.processor.process_batch([{"id": "bad", "direction": "expense"}])

        df = self.processor.errors_to_dataframe(batch.errors)

        self.assertEqual(list(df.columns), ["Transaction", "Error Type", "Error Message", "Timestamp"])
        self.assertEqual(df.iloc[0]["Error Type"], "MISSING_DATA")

    def test_main_writes_csv(self):
        """Test the command-line entry point writes results and errors."""
        path = os.path.join(self.temp_dir, "transactions.json")
        with open(path, "w", encoding="utf-8") as f:
            json.dump(sample_transactions() + [{"id": "bad", "direction": "expense"}], f)

        batch = main(path)

        results = pd.read_csv(os.path.join(self.temp_dir, "transactions_categorised.csv"))
        errors = pd.read_csv(os.path.join(self.temp_dir, "transactions_categorised_errors.csv"))
        self.assertEqual(len(results), 5)
        self.assertEqual(len(errors), 1)
        self.assertEqual(batch.stats.failed, 1)


if __name__ == '__main__':
    unittest.main()
