"""
Test suite for the markup_layout project.

This module contains all unit tests for the markup_layout package.
"""
