"""Typed models shared across update jobs."""
