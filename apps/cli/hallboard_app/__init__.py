"""Hallboard command line application."""
