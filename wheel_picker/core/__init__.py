"""wheel_picker.core — Foundation layer.

Contains the colour palette helpers, type definitions, wheel generator,
configuration loading and report builder.
This module has NO dependencies on wheel_picker.sweeps, wheel_picker.registry
or wheel_picker.picker. Only stdlib, numpy, and PIL are allowed here.
"""
