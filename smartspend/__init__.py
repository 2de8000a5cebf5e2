"""
SmartSpend - Source Package

A personal daily-spending tracker: record today's spendings, roll each day
into a bounded history when it ends, and derive weekly, category and
average statistics.

DESIGN PRINCIPLES:
1. Exactly one current day at any time
2. Validate before mutating, write through after
3. Time is always passed in, never read implicitly
4. Storage layer is swappable
"""

__version__ = "1.0.0"
__author__ = "SmartSpend Team"
