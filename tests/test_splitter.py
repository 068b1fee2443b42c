from __future__ import annotations

import math

import pytest

from csvsplit.core import (
    EmptyInputError,
    InvalidConfigurationError,
    SplitOptions,
    count_lines,
    estimate_chunk_count,
    split_csv,
    validate_and_normalize,
)


def _data_lines_from_chunks(chunks, include_header):
    recovered = []
    for chunk in chunks:
        lines = chunk.split("\n")
        recovered.extend(lines[1:] if include_header else lines)
    return recovered


def test_split_with_header_into_equal_chunks(sample_csv):
    result = split_csv(sample_csv, SplitOptions(max_lines_per_file=3, include_header=True))

    assert result.total_chunks == 4
    assert result.original_line_count == 9
    assert len(result.chunks) == 4
    for chunk in result.chunks:
        lines = chunk.split("\n")
        assert lines[0] == "name,age,city"
        assert len(lines) == 3


def test_split_with_remainder(sample_csv):
    result = split_csv(sample_csv, SplitOptions(max_lines_per_file=4, include_header=True))

    assert result.total_chunks == 3
    assert [len(chunk.split("\n")) - 1 for chunk in result.chunks] == [3, 3, 2]


def test_split_without_header(sample_csv):
    result = split_csv(sample_csv, SplitOptions(max_lines_per_file=3, include_header=False))

    assert result.total_chunks == 3
    assert result.chunks[0] == "John,25,New York\nJane,30,Los Angeles\nBob,35,Chicago"
    for chunk in result.chunks:
        assert not chunk.startswith("name,age,city")


def test_exact_fit_returns_input_unchanged():
    text = "name,age\nJohn,25\nJane,30"
    result = split_csv(text, SplitOptions(max_lines_per_file=3, include_header=True))

    assert result.total_chunks == 1
    assert result.chunks == (text,)


def test_header_only_input():
    result = split_csv("a,b,c", SplitOptions(max_lines_per_file=5, include_header=True))
    assert result.chunks == ("a,b,c",)
    assert result.total_chunks == 1
    assert result.original_line_count == 1

    result = split_csv("a,b,c\n", SplitOptions(max_lines_per_file=5, include_header=False))
    assert result.chunks == ("",)
    assert result.original_line_count == 1


def test_header_only_input_allows_single_line_files():
    result = split_csv("a,b,c", SplitOptions(max_lines_per_file=1, include_header=True))
    assert result.chunks == ("a,b,c",)


@pytest.mark.parametrize("text", ["", "   ", "\n\n"])
def test_empty_input_is_rejected(text):
    with pytest.raises(EmptyInputError, match="CSV content cannot be empty"):
        split_csv(text, SplitOptions(max_lines_per_file=5, include_header=True))


@pytest.mark.parametrize("max_lines", [0, -3, 2.5, True])
def test_non_positive_max_lines_is_rejected(max_lines):
    with pytest.raises(InvalidConfigurationError, match="greater than 0"):
        split_csv("a\nb", SplitOptions(max_lines_per_file=max_lines, include_header=True))


def test_single_line_files_with_header_are_rejected(sample_csv):
    options = SplitOptions(max_lines_per_file=1, include_header=True)
    with pytest.raises(InvalidConfigurationError, match="greater than 1"):
        split_csv(sample_csv, options)
    with pytest.raises(InvalidConfigurationError):
        estimate_chunk_count(sample_csv, options)


def test_crlf_input_keeps_carriage_returns(sample_csv):
    text = sample_csv.replace("\n", "\r\n")
    result = split_csv(text, SplitOptions(max_lines_per_file=3, include_header=True))

    assert result.original_line_count == 9
    assert result.total_chunks == 4
    assert result.chunks[0] == "name,age,city\r\nJohn,25,New York\r\nJane,30,Los Angeles\r"


def test_normalized_and_raw_input_split_the_same(sample_csv):
    options = SplitOptions(max_lines_per_file=4, include_header=True)
    normalized = validate_and_normalize(sample_csv).normalized_content

    assert split_csv(normalized, options) == split_csv(sample_csv, options)


@pytest.mark.parametrize("include_header", [True, False])
@pytest.mark.parametrize("max_lines", [2, 3, 4, 5, 8, 9, 100])
def test_data_lines_round_trip_and_counts_agree(sample_csv, max_lines, include_header):
    options = SplitOptions(max_lines_per_file=max_lines, include_header=include_header)
    result = split_csv(sample_csv, options)
    data_lines = sample_csv.split("\n")[1:]
    capacity = max_lines - 1 if include_header else max_lines

    assert _data_lines_from_chunks(result.chunks, include_header) == data_lines
    assert result.total_chunks == len(result.chunks) == math.ceil(len(data_lines) / capacity)
    assert estimate_chunk_count(sample_csv, options) == result.total_chunks

    sizes = [len(chunk.split("\n")) - (1 if include_header else 0) for chunk in result.chunks]
    assert all(size == capacity for size in sizes[:-1])
    if len(data_lines) % capacity:
        assert sizes[-1] < capacity
    else:
        assert sizes[-1] == capacity


def test_split_is_deterministic(sample_csv):
    options = SplitOptions(max_lines_per_file=4, include_header=True)
    assert split_csv(sample_csv, options) == split_csv(sample_csv, options)


def test_estimate_for_empty_and_header_only():
    options = SplitOptions(max_lines_per_file=3, include_header=True)
    assert estimate_chunk_count("", options) == 0
    assert estimate_chunk_count("a,b,c\n", options) == 1


def test_count_lines(sample_csv):
    assert count_lines(sample_csv + "\n") == 9
    assert count_lines("  ") == 0
