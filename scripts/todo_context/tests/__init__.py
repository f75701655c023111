"""Test suite for the todo state container.

Covers the data model, persisted-record codec, display ordering, the container
intents and its persistence round trip, and logging setup.
"""
