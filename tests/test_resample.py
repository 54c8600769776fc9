"""Tests for rasterkit.algorithms.resample: nearest-index downsampling."""

import numpy as np
import pytest
from rasterkit import Color, ContractViolation, Image, resample, resample_image, resample_sequence
from rasterkit.utils.debug_io import dump_image, stack_strips


def _red_gradient(m: int) -> list[Color]:
    return [Color(int(np.floor(255.0 * i / max(1, m - 1) + 0.5)), 0, 0) for i in range(m)]


def _expected_indices(m: int, n: int) -> list[int]:
    if n == 1:
        return [m // 2]
    return [max(0, min(m - 1, int(np.floor(i * (m - 1) / (n - 1) + 0.5)))) for i in range(n)]


class TestResampleSequence:
    def test_preserves_endpoints_and_round_mapping(self, debug_dir):
        src = _red_gradient(10)
        ds = resample_sequence(src, 4)

        assert len(ds) == 4
        assert ds[0] == src[0]
        assert ds[-1] == src[-1]
        # round(i * 9 / 3) for i in 0..3
        assert _expected_indices(10, 4) == [0, 3, 6, 9]
        assert ds == [src[i] for i in [0, 3, 6, 9]]

        dump_image(debug_dir / "00_colors_src_vs_ds.png", stack_strips(src, ds))

    @pytest.mark.parametrize("m,n", [(2, 2), (7, 3), (100, 17), (33, 32), (5, 2)])
    def test_endpoints_for_many_sizes(self, m, n):
        src = _red_gradient(m) if m > 2 else [Color(1, 2, 3), Color(4, 5, 6)]
        ds = resample_sequence(src, n)
        assert ds[0] == src[0]
        assert ds[-1] == src[-1]
        assert ds == [src[i] for i in _expected_indices(m, n)]

    def test_single_target_takes_lower_middle(self, debug_dir):
        src = _red_gradient(9)
        ds = resample_sequence(src, 1)
        assert ds == [src[4]]

        dump_image(debug_dir / "00_colors_src_vs_ds.png", stack_strips(src, ds))

    @pytest.mark.parametrize("m", [2, 3, 4, 10, 11])
    def test_single_target_for_any_length(self, m):
        src = [Color(i) for i in range(m)]
        assert resample_sequence(src, 1) == [src[m // 2]]

    def test_target_at_least_source_is_pass_through(self):
        src = _red_gradient(6)
        assert resample_sequence(src, 6) == src
        assert resample_sequence(src, 50) == src

    def test_pass_through_is_a_new_list(self):
        src = _red_gradient(6)
        out = resample_sequence(src, 6)
        assert out is not src

    def test_non_positive_target_is_empty(self):
        src = _red_gradient(6)
        assert resample_sequence(src, 0) == []
        assert resample_sequence(src, -3) == []

    def test_empty_source_is_empty(self):
        assert resample_sequence([], 4) == []

    def test_input_not_mutated(self):
        src = _red_gradient(10)
        before = list(src)
        resample_sequence(src, 3)
        assert src == before


class TestResampleImage:
    def test_gray_5x5_to_3x3_round_mapping(self, debug_dir):
        src = Image(5, 5, 1)
        for y in range(src.height):
            for x in range(src.width):
                src[y, x] = x + 10 * y

        ds = resample_image(src, 3, 3)

        assert (ds.width, ds.height, ds.channels) == (3, 3, 1)
        for oy, sy in enumerate([0, 2, 4]):
            for ox, sx in enumerate([0, 2, 4]):
                assert ds[oy, ox] == src[sy, sx]

        dump_image(debug_dir / "00_src.png", src)
        dump_image(debug_dir / "01_ds_3x3.png", ds)

    def test_rgb_preserves_channels(self, debug_dir):
        src = Image(4, 3, 3)
        for y in range(src.height):
            for x in range(src.width):
                src[y, x] = Color(10 * x, 20 * y, x + y)

        ds = resample_image(src, 2, 2)
        assert ds.channels == 3

        # 4 -> 2 picks x in [0, 3]; 3 -> 2 picks y in [0, 2]
        for oy, sy in enumerate([0, 2]):
            for ox, sx in enumerate([0, 3]):
                for c in range(3):
                    assert ds[oy, ox, c] == src[sy, sx, c]
                assert ds[oy, ox] == src[sy, sx]

        dump_image(debug_dir / "00_src.png", src)
        dump_image(debug_dir / "01_ds_2x2.png", ds)

    def test_axes_mapped_independently(self):
        arr = np.arange(6 * 9, dtype=np.int32).reshape(6, 9)
        src = Image.from_array(arr)
        ds = resample_image(src, 3, 2)
        # width 9 -> 3: [0, 4, 8]; height 6 -> 2: [0, 5]
        expected = arr[np.ix_([0, 5], [0, 4, 8])]
        assert np.array_equal(ds.array[:, :, 0], expected)

    def test_single_pixel_takes_center(self):
        arr = np.arange(5 * 4, dtype=np.uint8).reshape(4, 5)
        ds = resample_image(Image.from_array(arr), 1, 1)
        assert ds[0, 0] == arr[2, 2]

    def test_same_size_is_identity(self):
        arr = np.random.default_rng(0).integers(0, 256, size=(7, 5, 3), dtype=np.uint8)
        src = Image.from_array(arr)
        ds = resample_image(src, 5, 7)
        assert ds == src
        assert ds is not src

    def test_larger_target_is_not_an_error(self):
        src = Image.from_array(np.array([[1, 2], [3, 4]], dtype=np.uint8))
        ds = resample_image(src, 3, 3)
        assert (ds.width, ds.height) == (3, 3)
        assert ds[0, 0] == 1
        assert ds[2, 2] == 4

    @pytest.mark.parametrize("dtype", [np.uint8, np.float32, np.int32])
    def test_keeps_element_type(self, dtype):
        src = Image(6, 6, 3, dtype=dtype)
        src.fill(7)
        ds = resample_image(src, 2, 3)
        assert ds.dtype == np.dtype(dtype)
        assert np.all(ds.array == 7)

    def test_output_does_not_alias_input(self):
        src = Image(4, 4, 1)
        ds = resample_image(src, 2, 2)
        ds[0, 0] = 99
        assert src[0, 0] == 0

    @pytest.mark.parametrize("w,h", [(0, 2), (2, 0), (-1, 3)])
    def test_non_positive_target_violates_contract(self, w, h):
        with pytest.raises(ContractViolation) as exc:
            resample_image(Image(4, 4, 1), w, h)
        assert exc.value.code == 781234981

    def test_empty_source_violates_contract(self):
        with pytest.raises(ContractViolation) as exc:
            resample_image(Image(0, 4, 1), 1, 1)
        assert exc.value.code == 781234982

    def test_unsupported_channels_violate_contract(self):
        with pytest.raises(ContractViolation) as exc:
            resample_image(Image(4, 4, 4), 2, 2)
        assert exc.value.code == 781234983
        assert exc.value.values == (4,)


class TestResampleDispatch:
    def test_image(self):
        out = resample(Image(4, 4, 1), 2, 2)
        assert isinstance(out, Image)
        assert (out.width, out.height) == (2, 2)

    def test_sequence(self):
        src = [Color(i) for i in range(10)]
        assert resample(src, 4) == resample_sequence(src, 4)

    def test_wrong_arity(self):
        with pytest.raises(TypeError):
            resample(Image(4, 4, 1), 2)
        with pytest.raises(TypeError):
            resample([Color(1)], 2, 2)
