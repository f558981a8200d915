"""Clinic portal: global search and person schedule preview service."""
