"""Bounded contexts: intake (document ingestion) and scoring (keyword matching)."""
