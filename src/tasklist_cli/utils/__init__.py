"""Utility helpers for Task List CLI."""
