"""Charm: a small Forth-like stack calculator."""

version = '0.1.0'
