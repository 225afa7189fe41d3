"""Constant vocabularies shared by the API."""
