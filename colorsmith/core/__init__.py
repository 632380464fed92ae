"""colorsmith.core — Foundation layer.

Contains colour conversion, contrast math, scale synthesis, accessibility
enforcement, palette assembly, configuration, and the report builder.
This module has NO dependencies on colorsmith.commands or colorsmith.registry.
Only stdlib and numpy are allowed here.
"""
