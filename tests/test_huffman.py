import pytest

from dsdrills.huffman import (
    HuffmanNode,
    build_tree,
    code_table,
    compress,
    decompress,
    format_bits,
    frequencies,
    main,
)

SAMPLES = [
    "aab",
    "hello world",
    "abracadabra",
    "the quick brown fox jumps over the lazy dog",
    "zzzzzz",
]


def test_frequencies_counts_characters():
    assert frequencies("abracadabra") == {"a": 5, "b": 2, "r": 2, "c": 1, "d": 1}


def test_build_tree_root_weight_is_total():
    freqs = frequencies("hello world")
    assert build_tree(freqs).weight == len("hello world")


def test_build_tree_empty_raises():
    with pytest.raises(ValueError):
        build_tree({})


def test_build_tree_rejects_zero_weight():
    with pytest.raises(ValueError):
        build_tree({"a": 0, "b": 3})


def test_small_worked_example():
    freqs = frequencies("aab")
    assert code_table(build_tree(freqs)) == {"b": (0,), "a": (1,)}
    assert compress("aab", freqs) == [1, 1, 0]


@pytest.mark.parametrize("text", SAMPLES)
def test_round_trip(text):
    freqs = frequencies(text)
    assert decompress(compress(text, freqs), freqs) == text


@pytest.mark.parametrize("text", SAMPLES)
def test_codes_are_prefix_free(text):
    codes = list(code_table(build_tree(frequencies(text))).values())
    for a in codes:
        for b in codes:
            if a is not b:
                assert b[: len(a)] != a


@pytest.mark.parametrize("text", SAMPLES)
def test_encoded_length_matches_weighted_code_lengths(text):
    freqs = frequencies(text)
    table = code_table(build_tree(freqs))
    assert len(compress(text, freqs)) == sum(freqs[s] * len(table[s]) for s in freqs)


def test_more_frequent_symbols_get_codes_no_longer():
    freqs = frequencies("abracadabra")
    table = code_table(build_tree(freqs))
    assert len(table["a"]) <= len(table["b"]) <= len(table["c"])


def test_single_symbol_gets_one_bit():
    freqs = frequencies("zzzzzz")
    tree = build_tree(freqs)
    assert tree.is_leaf
    assert len(compress("zzzzzz", freqs)) == 6


def test_compress_unknown_symbol_raises():
    with pytest.raises(ValueError):
        compress("abc", frequencies("ab"))


def test_decompress_drops_trailing_partial_code():
    freqs = frequencies("abracadabra")
    bits = compress("abracadabra", freqs)
    table = code_table(build_tree(freqs))
    extra = list(table["c"][:-1])
    assert decompress(bits + extra, freqs) == "abracadabra"


def test_decompress_accepts_booleans():
    freqs = frequencies("hello")
    bits = [bool(b) for b in compress("hello", freqs)]
    assert decompress(bits, freqs) == "hello"


def test_format_bits():
    assert format_bits([1, 0, True, False]) == "1010"


def test_node_leaf_flag():
    leaf = HuffmanNode("a", 1)
    inner = HuffmanNode("\0", 2, leaf, HuffmanNode("b", 1))
    assert leaf.is_leaf and not inner.is_leaf


def test_main_prints_decoded_text(capsys):
    assert main(["abracadabra"]) == 0
    out = capsys.readouterr().out
    assert "Decoded: abracadabra" in out
    assert "Size before encoding: 88 bits" in out


def test_main_empty_input_fails(capsys):
    assert main([""]) == 1
    assert "nothing to encode" in capsys.readouterr().err