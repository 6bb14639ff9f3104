"""
Boundary layer for external system integrations.

Handles all interactions with external systems (relational store, session
cookie, mini-app notification webhooks).
"""
