"""Utility helpers for mdlite."""
