"""
first_project: a walkthrough of basic ArangoDB operations with the python-arango driver.

Run it with `python -m first_project` or the `first-project` console script.
"""

__version__ = "0.1.0"

from .walkthrough import run_walkthrough, main, DATABASE_NAME, COLLECTION_NAME
