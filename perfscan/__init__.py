"""
perfscan - extract match performance rows from game results screenshots
"""

__version__ = "1.0.0"
