"""Predict service: forwards prompts to a local generation backend."""
