"""Extraction package for leadernet.

Wraps the configured chat model with the prompts used to pull entities,
relationships and insights out of news headlines and search excerpts.
"""
