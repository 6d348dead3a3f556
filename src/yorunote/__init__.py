"""Yorunote - nightly reflection journal."""
