"""Keyword chatbot over the disease catalog."""
