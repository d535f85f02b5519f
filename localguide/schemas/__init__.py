"""
Pydantic schemas for API request and response validation.

Every endpoint uses explicit request/response models; the chat models are
the contract shared with the guide frontend.
"""
