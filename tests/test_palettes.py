import pytest

from paletti import MY_COMPANY_COLORS
from paletti.exceptions import ConfigError, MissingNameError
from paletti.palettes import (
    CollectionPalette,
    NamedCollection,
    SingleSequence,
    VectorPalette,
    get_pal,
)
from paletti.validation import validate_color_collection

COMPANY = list(MY_COMPANY_COLORS.values())


def test_sequence_gives_vector_palette():
    pal = get_pal(COMPANY)
    assert isinstance(pal, VectorPalette)
    assert isinstance(pal.source, SingleSequence)
    assert pal.colors == tuple(COMPANY)


def test_flat_named_mapping_is_a_single_palette():
    pal = get_pal(MY_COMPANY_COLORS)
    assert isinstance(pal, VectorPalette)
    assert pal()(3) == COMPANY


def test_collection_gives_collection_palette():
    pal = get_pal({"p1": ["#000000", "#FFFFFF"], "p2": ("#701B06", "#78A8D1")})
    assert isinstance(pal, CollectionPalette)
    assert isinstance(pal.source, NamedCollection)
    assert pal.names == ["p1", "p2"]
    assert pal.default_name == "p1"


def test_collection_ramp_end_to_end():
    pal = get_pal({"p1": ["#000000", "#FFFFFF"]})
    assert pal("p1")(2) == ["#000000", "#FFFFFF"]


def test_collection_missing_palette():
    pal = get_pal({"p1": ["#000000", "#FFFFFF"]})
    with pytest.raises(LookupError, match="missing"):
        pal("missing")
    with pytest.raises(MissingNameError) as excinfo:
        pal("missing")
    assert excinfo.value.missing == ["missing"]


def test_collection_of_named_mappings():
    pal = get_pal({"company": dict(MY_COMPANY_COLORS)})
    assert pal("company")(3) == COMPANY


def test_ramp_returns_n_valid_colors():
    ramp = get_pal(COMPANY)()
    for n in (1, 2, 5, 17):
        colors = ramp(n)
        assert len(colors) == n
        validate_color_collection(colors)


def test_ramp_hits_anchors_and_interpolates():
    colors = get_pal(["#000000", "#FFFFFF"])()(3)
    assert colors[0] == "#000000"
    assert colors[-1] == "#FFFFFF"
    assert colors[1] in ("#7F7F7F", "#808080")


def test_single_color_of_one():
    assert get_pal(COMPANY)()(1) == ["#701B06"]


def test_single_anchor_palette_repeats():
    assert get_pal(["#123456"])()(3) == ["#123456"] * 3


def test_reverse_swaps_endpoints():
    pal = get_pal(COMPANY)
    forward = pal()(len(COMPANY))
    backward = pal(reverse=True)(len(COMPANY))
    assert forward[0] == backward[-1]
    assert forward[-1] == backward[0]
    assert backward == COMPANY[::-1]


def test_reverse_on_collection():
    pal = get_pal({"p1": ["#000000", "#FFFFFF"]})
    assert pal("p1", reverse=True)(2) == ["#FFFFFF", "#000000"]


def test_opacity_adds_alpha_channel():
    colors = get_pal(["#000000", "#FFFFFF"])(opacity=0.5)(2)
    assert colors == ["#00000080", "#FFFFFF80"]


def test_opacity_out_of_range():
    with pytest.raises(ConfigError):
        get_pal(COMPANY)(opacity=1.5)
    with pytest.raises(ConfigError):
        get_pal(COMPANY)(opacity="opaque")


def test_bad_count():
    ramp = get_pal(COMPANY)()
    with pytest.raises(ConfigError):
        ramp(0)
    with pytest.raises(ConfigError):
        ramp(2.5)


def test_invalid_color_fails_at_construction():
    with pytest.raises(ConfigError):
        get_pal(["#000000", "not-a-color"])
    with pytest.raises(ConfigError):
        get_pal({"p1": ["#000000"], "p2": ["not-a-color"]})


def test_blank_palette_name_fails_at_construction():
    with pytest.raises(ConfigError):
        get_pal({"": ["#000000"], "p2": ["#FFFFFF"]})


def test_rejects_unusable_inputs():
    for bad in ("#000000", 42, None, [], {}, {"p1": "#000000", "p2": ["#FFFFFF"]}):
        with pytest.raises(ConfigError):
            get_pal(bad)


def test_blank_name_in_flat_mapping_fails_at_construction():
    with pytest.raises(ConfigError):
        get_pal({"red": "#701B06", "": "#78A8D1"})


def test_numpy_and_pandas_palettes():
    import numpy as np
    import pandas as pd

    assert get_pal(np.array(["#000000", "#FFFFFF"]))()(2) == ["#000000", "#FFFFFF"]
    colors = pd.Series(["#701B06", "#78A8D1", "#701B06"])
    assert get_pal(colors.unique())()(2) == ["#701B06", "#78A8D1"]
    assert get_pal(colors)()(3) == ["#701B06", "#78A8D1", "#701B06"]
    pal = get_pal({"p1": np.array(["#000000", "#FFFFFF"])})
    assert pal("p1")(2) == ["#000000", "#FFFFFF"]


def test_two_dimensional_array_is_rejected():
    import numpy as np

    with pytest.raises(ConfigError, match="1-D"):
        get_pal(np.array([["#000000", "#FFFFFF"]]))
