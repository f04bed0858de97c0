"""Core Layer — pure admission logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, infrastructure/, models/ or db/
    - Validation and normalization functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell: the shell persists what
      core/admission.py admits
"""
