"""
AutoCat Batch Processor for categorising bank-transaction exports.
Runs the categoriser over a list of transactions in fixed-size batches
with per-transaction error handling and pandas export.
"""

import json
import logging
import sys
import traceback
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Dict, List, Mapping, Optional, Union

from autocat_engine.categorisation.corrections import UserCorrection
from autocat_engine.categorisation.engine import AutoCategoriser
from autocat_engine.categorisation.models import AutoCatResult, BusinessExpense, TransactionInput
from autocat_engine.categorisation.vendor_cache import VendorCacheEntry

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 50


class InvalidTransactionError(Exception):
    """Raised when a transaction record cannot be turned into a TransactionInput."""
    pass


@dataclass
class ProcessingError:
    """Details of a processing error."""
    transaction_ref: str
    error_type: str
    error_message: str
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())


@dataclass
class CategorisedTransaction:
    """A transaction together with its classification."""
    index: int
    transaction: TransactionInput
    result: AutoCatResult


@dataclass
class BatchStats:
    """Statistics for batch processing."""
    total_transactions: int = 0
    processed: int = 0
    successful: int = 0
    failed: int = 0

    # Outcome counts
    needs_review: int = 0
    needs_receipt: int = 0
    business: int = 0
    personal: int = 0
    undetermined: int = 0

    total_confidence: int = 0

    # Timing
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None

    @property
    def categorised(self) -> int:
        return self.successful

    @property
    def average_confidence(self) -> float:
        """Calculate average confidence score."""
        if self.successful == 0:
            return 0.0
        return self.total_confidence / self.successful

    @property
    def processing_time(self) -> float:
        """Calculate total processing time in seconds."""
        if self.start_time and self.end_time:
            return (self.end_time - self.start_time).total_seconds()
        return 0.0

    @property
    def success_rate(self) -> float:
        """Calculate success rate as percentage."""
        if self.total_transactions == 0:
            return 0.0
        return (self.successful / self.total_transactions) * 100

    def record(self, result: AutoCatResult) -> None:
        self.successful += 1
        self.total_confidence += result.confidence_score
        if result.needs_review:
            self.needs_review += 1
        if result.needs_receipt:
            self.needs_receipt += 1
        if result.business_expense is BusinessExpense.BUSINESS:
            self.business += 1
        elif result.business_expense is BusinessExpense.PERSONAL:
            self.personal += 1
        else:
            self.undetermined += 1


@dataclass
class BatchResult:
    """Complete result of batch processing."""
    stats: BatchStats
    results: List[CategorisedTransaction]
    errors: List[ProcessingError]
    error_summary: Dict[str, int] = field(default_factory=dict)

    @staticmethod
    def merge_results(result1: 'BatchResult', result2: 'BatchResult') -> 'BatchResult':
        """
        Merge two BatchResult objects into a single combined result.

        Args:
            result1: First batch result (typically the existing cumulative result)
            result2: Second batch result (typically the new batch to add)

        Returns:
            New BatchResult with merged data
        """
        merged_stats = BatchStats()
        for name in (
            "total_transactions", "processed", "successful", "failed",
            "needs_review", "needs_receipt", "business", "personal", "undetermined",
            "total_confidence",
        ):
            setattr(merged_stats, name, getattr(result1.stats, name) + getattr(result2.stats, name))

        # Use earliest start time and latest end time
        starts = [t for t in (result1.stats.start_time, result2.stats.start_time) if t]
        ends = [t for t in (result1.stats.end_time, result2.stats.end_time) if t]
        merged_stats.start_time = min(starts) if starts else None
        merged_stats.end_time = max(ends) if ends else None

        merged_error_summary = dict(result1.error_summary)
        for error_type, count in result2.error_summary.items():
            merged_error_summary[error_type] = merged_error_summary.get(error_type, 0) + count

        return BatchResult(
            stats=merged_stats,
            results=result1.results + result2.results,
            errors=result1.errors + result2.errors,
            error_summary=merged_error_summary
        )


class AutoCatBatchProcessor:
    """Batch processor for transaction auto-categorisation."""

    def __init__(self, categoriser: Optional[AutoCategoriser] = None, batch_size: int = DEFAULT_BATCH_SIZE):
        """
        Initialize the batch processor.

        Args:
            categoriser: Categoriser to use (defaults to the built-in tables)
            batch_size: Transactions per batch; progress is reported after each batch
        """
        if batch_size < 1:
            raise ValueError(f"batch_size must be at least 1, got {batch_size}")
        self.categoriser = categoriser or AutoCategoriser()
        self.batch_size = batch_size
        logger.info(f"Initialized batch processor: batch_size={batch_size}")

    def process_batch(
        self,
        transactions: List[Union[Dict, TransactionInput]],
        vendor_cache: Optional[Mapping[str, VendorCacheEntry]] = None,
        user_corrections: Optional[Mapping[str, UserCorrection]] = None,
        progress_callback: Optional[Callable[[int, int, str], None]] = None
    ) -> BatchResult:
        """
        Categorise a list of transactions.

        A failing transaction is recorded as a ProcessingError and the
        batch continues.

        Args:
            transactions: Transaction dicts or TransactionInput objects
            vendor_cache: Optional vendor cache snapshot (read only)
            user_corrections: Optional user corrections keyed by vendor pattern
            progress_callback: Optional callback(current, total, message)

        Returns:
            BatchResult with all processing results
        """
        total = len(transactions)
        stats = BatchStats(total_transactions=total, start_time=datetime.now())

        results = []
        errors = []
        error_types = {}

        logger.info(f"Starting batch categorisation of {total} transactions")

        for batch_start in range(0, total, self.batch_size):
            batch_end = min(batch_start + self.batch_size, total)

            for idx in range(batch_start, batch_end):
                item = transactions[idx]
                ref = self._transaction_ref(item, idx)
                error_type = None
                try:
                    tx = self._to_input(item, idx)
                    result = self.categoriser.categorise(tx, vendor_cache, user_corrections)
                    results.append(CategorisedTransaction(index=idx, transaction=tx, result=result))
                    stats.record(result)

                except KeyError as e:
                    error_type = "MISSING_DATA"
                    message = f"Missing required field: {str(e)}"
                    logger.error(f"Missing data in {ref}: {e}")

                except (InvalidTransactionError, ValueError) as e:
                    error_type = "DATA_VALIDATION_ERROR"
                    message = str(e)
                    logger.error(f"Data validation error in {ref}: {e}")

                except Exception as e:
                    error_type = "PROCESSING_ERROR"
                    message = f"{type(e).__name__}: {str(e)}"
                    logger.error(f"Processing error in {ref}: {traceback.format_exc()}")

                stats.processed += 1
                if error_type:
                    errors.append(ProcessingError(
                        transaction_ref=ref,
                        error_type=error_type,
                        error_message=message
                    ))
                    stats.failed += 1
                    error_types[error_type] = error_types.get(error_type, 0) + 1

            if progress_callback:
                progress_callback(batch_end, total, f"Categorised {batch_end}/{total} transactions")

        stats.end_time = datetime.now()

        logger.info(
            f"Batch categorisation complete: {stats.successful}/{stats.total_transactions} successful, "
            f"{stats.needs_review} need review, avg confidence: {stats.average_confidence:.1f}, "
            f"time: {stats.processing_time:.1f}s"
        )

        return BatchResult(
            stats=stats,
            results=results,
            errors=errors,
            error_summary=error_types
        )

    def process_json(
        self,
        file_name: str,
        content: bytes,
        vendor_cache: Optional[Mapping[str, VendorCacheEntry]] = None,
        user_corrections: Optional[Mapping[str, UserCorrection]] = None,
        progress_callback: Optional[Callable[[int, int, str], None]] = None
    ) -> BatchResult:
        """Load transactions from a JSON upload and categorise them."""
        try:
            transactions = self.load_transactions_from_json(content)
        except json.JSONDecodeError as e:
            return self._file_error(file_name, "JSON_PARSE_ERROR", f"Invalid JSON: {str(e)}")
        except InvalidTransactionError as e:
            return self._file_error(file_name, "INVALID_JSON_STRUCTURE", str(e))

        return self.process_batch(transactions, vendor_cache, user_corrections, progress_callback)

    @staticmethod
    def load_transactions_from_json(content: bytes) -> List[Dict]:
        """
        Parse a JSON export of transactions.

        Accepts a list of transactions or an object with a "transactions" list.

        Raises:
            json.JSONDecodeError: If the content is not valid JSON
            InvalidTransactionError: If no transaction list can be found
        """
        try:
            data = json.loads(content.decode("utf-8"))
        except UnicodeDecodeError:
            # Fallback to cp1252 for Windows-encoded characters (e.g., byte 0x9c)
            try:
                data = json.loads(content.decode("cp1252"))
            except UnicodeDecodeError:
                # Final fallback to latin-1 which accepts all byte values
                data = json.loads(content.decode("latin-1"))

        if isinstance(data, dict):
            data = data.get("transactions")
        if not isinstance(data, list):
            raise InvalidTransactionError("Expected a list of transactions or an object with a 'transactions' list")
        return data

    @staticmethod
    def _transaction_ref(item, idx: int) -> str:
        if isinstance(item, dict) and item.get("id"):
            return str(item["id"])
        return f"transaction {idx}"

    @staticmethod
    def _to_input(item: Union[Dict, TransactionInput], idx: int) -> TransactionInput:
        if isinstance(item, TransactionInput):
            return item
        if not isinstance(item, dict):
            raise InvalidTransactionError(f"Transaction {idx} is not an object: {type(item).__name__}")

        tx = TransactionInput.from_dict(item)
        if tx.direction not in ("income", "expense"):
            raise InvalidTransactionError(f"Transaction {idx} has invalid direction: {tx.direction!r}")
        return tx

    @staticmethod
    def _file_error(file_name: str, error_type: str, message: str) -> BatchResult:
        logger.error(f"{error_type} in {file_name}: {message}")
        now = datetime.now()
        return BatchResult(
            stats=BatchStats(failed=1, start_time=now, end_time=now),
            results=[],
            errors=[ProcessingError(transaction_ref=file_name, error_type=error_type, error_message=message)],
            error_summary={error_type: 1}
        )

    def results_to_dataframe(self, results: List[CategorisedTransaction]):
        """
        Convert categorised transactions to a pandas DataFrame.

        Args:
            results: List of CategorisedTransaction objects

        Returns:
            pandas DataFrame
        """
        import pandas as pd

        rows = []
        for item in results:
            tx = item.transaction
            result = item.result
            rows.append({
                "Date": tx.date,
                "Description": tx.description,
                "Amount": tx.amount,
                "Direction": tx.direction,
                "Category": result.category,
                "VAT Type": result.vat_type,
                "VAT Deductible": result.vat_deductible,
                "Business Purpose": result.business_purpose,
                "Confidence": result.confidence_score,
                "Needs Review": result.needs_review,
                "Needs Receipt": result.needs_receipt,
                "Business Expense": result.business_expense.value,
                "Relief Type": result.relief_type or "",
                "Notes": result.notes,
            })

        return pd.DataFrame(rows)

    def errors_to_dataframe(self, errors: List[ProcessingError]):
        """
        Convert processing errors to a pandas DataFrame.

        Args:
            errors: List of ProcessingError objects

        Returns:
            pandas DataFrame
        """
        import pandas as pd

        rows = []
        for error in errors:
            row = {
                "Transaction": error.transaction_ref,
                "Error Type": error.error_type,
                "Error Message": error.error_message,
                "Timestamp": error.timestamp,
            }
            rows.append(row)

        return pd.DataFrame(rows)


def main(path: str, output_path: Optional[str] = None) -> BatchResult:
    """Categorise a JSON file of transactions and write the results as CSV."""
    processor = AutoCatBatchProcessor()
    with open(path, "rb") as f:
        batch = processor.process_json(path, f.read())

    output_path = output_path or f"{path.rsplit('.', 1)[0]}_categorised.csv"
    processor.results_to_dataframe(batch.results).to_csv(output_path, index=False)
    logger.info(f"Wrote {len(batch.results)} rows to {output_path}")

    if batch.errors:
        errors_path = f"{output_path.rsplit('.', 1)[0]}_errors.csv"
        processor.errors_to_dataframe(batch.errors).to_csv(errors_path, index=False)
        logger.warning(f"{len(batch.errors)} transactions failed, see {errors_path}")

    return batch


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s"
    )
    if len(sys.argv) not in (2, 3):
        logger.error("Usage: python autocat_batch_processor.py transactions.json [output.csv]")
        sys.exit(1)

    main(*sys.argv[1:])
