from moelist.core.sizes import SIZE_TYPES, get_size_type

MB = 1024 * 1024


def test_boundaries_are_exclusive():
    assert get_size_type(0) == "XXS"
    assert get_size_type(20 * MB - 1) == "XXS"
    assert get_size_type(20 * MB) == "XS"
    assert get_size_type(50 * MB) == "S"
    assert get_size_type(100 * MB) == "M"
    assert get_size_type(175 * MB) == "L"
    assert get_size_type(300 * MB) == "XL"
    assert get_size_type(500 * MB) == "XXL"
    assert get_size_type(800 * MB - 1) == "XXL"
    assert get_size_type(800 * MB) == "XXXL"
    assert get_size_type(50 * 1024 * MB) == "XXXL"


def test_tiers_are_monotonic():
    sizes = [0, 1, 19 * MB, 20 * MB, 49 * MB, 99 * MB, 174 * MB, 299 * MB, 499 * MB, 799 * MB, 801 * MB]
    ranks = [SIZE_TYPES.index(get_size_type(s)) for s in sizes]
    assert ranks == sorted(ranks)
    assert len(SIZE_TYPES) == 8
