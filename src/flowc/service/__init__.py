"""Compile-and-run service for Flow programs."""
