"""Shared utilities for pg-query-builder."""
