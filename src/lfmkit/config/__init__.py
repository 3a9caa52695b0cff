"""Configuration package for lfmkit.

Import ``lfmkit.config.settings`` for validated runtime constants and
``lfmkit.config.config`` for the TOML-backed ``Config`` dataclass.
"""
