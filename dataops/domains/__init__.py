"""
Domains - Algorithm layer.

Each domain is self-contained with:
- contracts.py: Interfaces (Protocol classes)
- models.py: Pydantic data models
- Implementation files
- test_*.py modules beside the code

Shared argument rules live in sequence.py.
"""

__all__ = [
    "sequence",
    "sorting",
    "searching",
    "operations",
]
