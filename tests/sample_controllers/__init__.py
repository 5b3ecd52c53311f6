"""Routers used as controllers by the test suite."""
