"""expressgen -- Express application skeleton generator.

Quick usage::

    python -m expressgen my-app --pg --dev
"""

__version__ = "4.16.1"
