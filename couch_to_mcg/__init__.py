"""Couch to MCG - half-marathon training plan tracker.

The schedule engine lives in `couch_to_mcg.plans`; storage, sync and
completion tracking live in `couch_to_mcg.state`.
"""

__version__ = "0.1.0"
