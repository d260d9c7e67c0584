"""
linsort: linear-time non-comparison integer sorts and a benchmark harness.

Algorithms live in `linsort.algorithms`; the harness in `linsort.datasets`,
`linsort.validate` and `linsort.bench`.
"""

__version__ = "0.1.0"
