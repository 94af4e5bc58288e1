"""
Bookkeeping - Source Package

Value objects for financial bookkeeping records: accounts that live
for a span of time, and the point-in-time balances recorded in them.

DESIGN PRINCIPLES:
1. Immutable values, no I/O in the core
2. Fail early, fail visibly
3. No silent corrections
4. Construction is all or nothing
5. Every admission decision is auditable
"""

__version__ = "1.0.0"
__author__ = "Bookkeeping Team"
