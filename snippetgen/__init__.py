"""Interactively generate C++17 example programs from keywords."""
