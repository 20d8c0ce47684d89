"""Adapters layer - Concrete implementations of ports.

This module contains the configured, logging entry points built on the
core graph and search code.
"""
