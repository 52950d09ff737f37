"""
Growth Accelerators CRM backend.

Consultation intake, prospect pipeline, interaction log and client roster
served over a FastAPI application backed by an in-process record store.
"""

__version__ = "1.0.0"
