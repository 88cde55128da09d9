"""Corvid vocabulary flashcard trainer."""
