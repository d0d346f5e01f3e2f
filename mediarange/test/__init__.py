"""Regression test suite for MediaRange."""
