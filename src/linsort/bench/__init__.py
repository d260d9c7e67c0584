"""
Benchmark harness: `measure.time_sort_call` and the YAML-driven `runner`.
"""
