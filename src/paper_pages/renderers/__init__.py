"""Renderers for paper pages and the site chrome around them."""
