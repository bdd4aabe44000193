"""
dataops - In-place integer sorting and searching behind one capability interface.

Example:
    >>> from dataops.domains.operations import DataOperationAdapter
    >>> op = DataOperationAdapter()
    >>> data = [5, 3, 8, 4, 9, 1, 2]
    >>> op.sort(data)
    >>> op.search(data, 4)
    3
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
