"""Schemas Layer: Pydantic models for requests, envelopes and tool arguments."""
