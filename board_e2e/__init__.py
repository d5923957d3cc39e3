"""Browser test suite for the task board.

Cards are verified by a named scenario when one is registered for the card
title, otherwise by per-tag behavior checks.
"""

__version__ = "1.0.0"
