"""Benchmark parse and unparse on large messages.

Run with:
    pytest benchmarks/benchmark_codec.py -v --benchmark-only
"""

try:
    import pytest

    from entitas import parse, unparse

    @pytest.mark.benchmark(group="parse")
    def test_benchmark_parse_markup(benchmark, large_message):
        """Benchmark parse of a markup-heavy message."""
        benchmark(parse, large_message)

    @pytest.mark.benchmark(group="parse")
    def test_benchmark_parse_plain(benchmark, plain_message):
        """Benchmark parse of a message without markup (baseline)."""
        benchmark(parse, plain_message)

    @pytest.mark.benchmark(group="unparse")
    def test_benchmark_unparse(benchmark, large_message):
        """Benchmark unparse of the entities from a markup-heavy message."""
        text, entities = parse(large_message)

        result = benchmark(unparse, text, entities)
        assert result == large_message

except ImportError:
    pass  # pytest not available
