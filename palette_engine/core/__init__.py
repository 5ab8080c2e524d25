"""palette_engine.core: foundation layer.

Contains the colour types, conversions, contrast engine, harmony rules,
palette regeneration, URL state codec, settings and report builder.
This module has NO dependencies on palette_engine.commands or palette_engine.registry.
Only stdlib and numpy are allowed here.
"""
