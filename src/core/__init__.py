"""
Core domain models, mathematical primitives, and invariants.

This module contains the foundational building blocks that are independent
of any rendering or I/O layer (color models, channel perturbation,
rejection sampling, random sources).
"""
