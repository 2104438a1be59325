"""Resolve the refs a Super-Linter job should check out and compare against."""
