"""Benchmarks for the parse, format and geocoding hot paths (pytest-benchmark).

Run with::

    pytest tests/benchmarks/ --benchmark-sort=median

or as plain functional tests::

    pytest tests/benchmarks/ --benchmark-disable
"""
