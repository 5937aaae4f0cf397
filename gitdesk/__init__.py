"""
GitDesk - No Local Changes Blankslate

Contextual next-action panel shown when a repository has no
uncommitted changes.
"""

__title__ = "GitDesk"
__author__ = "GitDesk Team"
__version__ = "1.0.0"
__license__ = "MIT"
