"""
Core domain models, mathematical primitives, and output contracts.

Gaussian kernel, difference-extrema search and fixed-point quantization.
Independent of the ABI encoder and the command line.
"""
