# Services package init
"""
Scatter-Brain Backend — Services Layer
=======================================

What:  Business logic sitting between routes (HTTP) and the thought store.

Service Inventory:
    - ThoughtService: create / list / get / update thoughts
"""
