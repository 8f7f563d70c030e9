"""
Income Classification Module.

Classifies money received: Revenue refunds, commercial refunds, RCT income and sales.
"""

from .income_detector import IncomeClassifier

__all__ = [
    "IncomeClassifier",
]
