# Schemas package init
"""
Scatter-Brain Backend — API Schemas
====================================

What:  Pydantic models for request bodies and response payloads.
"""
