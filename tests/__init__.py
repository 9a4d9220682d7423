"""Test suite for symbolsync."""
