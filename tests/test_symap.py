import pytest

from lvhost.symap import Symap

SYMS = ["hello", "bonjour", "goodbye", "aloha", "salut"]


def test_map_sequence_like_standalone_check():
    symap = Symap()
    for sym in SYMS:
        assert symap.try_map(sym) is None
        sym_id = symap.map(sym)
        assert sym_id > 0
        assert symap.unmap(sym_id) == sym
        assert symap.map(sym) == sym_id
        assert symap.try_map(sym) == sym_id


def test_ids_start_at_one_and_follow_insertion_order():
    symap = Symap()
    ids = [symap.map(sym) for sym in SYMS]
    assert ids == list(range(1, len(SYMS) + 1))


def test_len_counts_distinct_symbols():
    symap = Symap()
    for sym in SYMS + SYMS:
        symap.map(sym)
    assert len(symap) == len(SYMS)


def test_unmap_zero_and_out_of_range():
    symap = Symap()
    symap.map("hello")
    assert symap.unmap(0) is None
    assert symap.unmap(2) is None
    assert symap.unmap(-1) is None


def test_empty_map():
    symap = Symap()
    assert len(symap) == 0
    assert symap.try_map("anything") is None
    assert symap.unmap(1) is None


def test_distinct_symbols_get_distinct_ids():
    symap = Symap()
    ids = {symap.map(sym) for sym in SYMS}
    assert len(ids) == len(SYMS)


def test_non_string_rejected():
    symap = Symap()
    with pytest.raises(TypeError):
        symap.map(42)