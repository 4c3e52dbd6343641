"""Reconciliation, workflow session, and batch pipeline."""
