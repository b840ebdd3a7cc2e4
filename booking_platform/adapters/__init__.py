"""Interface adapters - framework-agnostic translators (presenters, view models).

Depends on the domain and application layers only.
"""
