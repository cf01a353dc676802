import pytest

from cipherplay.des_ops import (
    ITER_SHIFT,
    apply_initial_permutation,
    apply_p,
    apply_pc1,
    apply_pc2,
    combine_block,
    combine_round_key,
    expand_r,
    extract_sbox_input,
    pad_sbox_output,
    query_s_box,
    rotate_left_28,
    split_block,
    split_key,
)

VECTOR_KEY = 0x133457799BBCDFF1

EXPECTED_C = [
    0b1110000110011001010101011111,
    0b1100001100110010101010111111,
    0b0000110011001010101011111111,
    0b0011001100101010101111111100,
    0b1100110010101010111111110000,
    0b0011001010101011111111000011,
    0b1100101010101111111100001100,
    0b0010101010111111110000110011,
    0b0101010101111111100001100110,
    0b0101010111111110000110011001,
    0b0101011111111000011001100101,
    0b0101111111100001100110010101,
    0b0111111110000110011001010101,
    0b1111111000011001100101010101,
    0b1111100001100110010101010111,
    0b1111000011001100101010101111,
]

EXPECTED_D = [
    0b1010101011001100111100011110,
    0b0101010110011001111000111101,
    0b0101011001100111100011110101,
    0b0101100110011110001111010101,
    0b0110011001111000111101010101,
    0b1001100111100011110101010101,
    0b0110011110001111010101010110,
    0b1001111000111101010101011001,
    0b0011110001111010101010110011,
    0b1111000111101010101011001100,
    0b1100011110101010101100110011,
    0b0001111010101010110011001111,
    0b0111101010101011001100111100,
    0b1110101010101100110011110001,
    0b1010101010110011001111000111,
    0b0101010101100110011110001111,
]

EXPECTED_K = [
    0b000110110000001011101111111111000111000001110010,
    0b011110011010111011011001110110111100100111100101,
    0b010101011111110010001010010000101100111110011001,
    0b011100101010110111010110110110110011010100011101,
    0b011111001110110000000111111010110101001110101000,
    0b011000111010010100111110010100000111101100101111,
    0b111011001000010010110111111101100001100010111100,
    0b111101111000101000111010110000010011101111111011,
    0b111000001101101111101011111011011110011110000001,
    0b101100011111001101000111101110100100011001001111,
    0b001000010101111111010011110111101101001110000110,
    0b011101010111000111110101100101000110011111101001,
    0b100101111100010111010001111110101011101001000001,
    0b010111110100001110110111111100101110011100111010,
    0b101111111001000110001101001111010011111100001010,
    0b110010110011110110001011000011100001011111110101,
]


def test_apply_ip_works():
    source = 0x0123456789ABCDEF
    expected = 0xCC00CCFFF0AAF0AA
    assert apply_initial_permutation(source, False) == expected
    assert apply_initial_permutation(expected, True) == source


@pytest.mark.parametrize("value", [0, 1, 0xFFFFFFFFFFFFFFFF, 0xDEADBEEFCAFEBABE])
def test_ip_inverse_round_trip(value):
    permuted = apply_initial_permutation(value, False)
    assert apply_initial_permutation(permuted, True) == value


def test_apply_pc1_works():
    key_bits = 0b00010011_00110100_01010111_01111001_10011011_10111100_11011111_11110001
    expected = 0b1111000_0110011_0010101_0101111_0101010_1011001_1001111_0001111
    assert apply_pc1(key_bits) == expected


def test_expand_r_works():
    r = 0b11110000101010101111000010101010
    expected = 0b011110100001010101010101011110100001010101010101
    assert expand_r(r) == expected


def test_key_scheduling_correct():
    c, d = split_key(apply_pc1(VECTOR_KEY))
    assert c == 0b1111000011001100101010101111
    assert d == 0b0101010101100110011110001111
    for i, shift in enumerate(ITER_SHIFT):
        c = rotate_left_28(c, shift)
        d = rotate_left_28(d, shift)
        assert c == EXPECTED_C[i], f"wrong C{i + 1}"
        assert d == EXPECTED_D[i], f"wrong D{i + 1}"
        assert apply_pc2(combine_round_key(c, d)) == EXPECTED_K[i]


def test_query_s_box_first_box():
    # row 0b01, column 0b1101 of S1
    assert query_s_box(0, 0b011011) == 5


def test_query_s_box_corners():
    assert query_s_box(0, 0b000000) == 14
    assert query_s_box(7, 0b111111) == 11


def test_query_s_box_bad_index():
    with pytest.raises(ValueError):
        query_s_box(8, 0)


def test_apply_p_maps_single_bit():
    # output bit 1 takes input bit 16
    assert apply_p(1 << (32 - 16)) == 1 << 31


def test_split_and_combine_block():
    high, low = split_block(0x0123456789ABCDEF)
    assert (high, low) == (0x01234567, 0x89ABCDEF)
    assert combine_block(high, low) == 0x0123456789ABCDEF


def test_split_and_combine_key():
    high, low = split_key(0xABCDEF12345678)
    assert (high, low) == (0xABCDEF1, 0x2345678)
    assert combine_round_key(high, low) == 0xABCDEF12345678


def test_extract_sbox_input():
    value = 0xFC0000000003
    assert extract_sbox_input(0, value) == 0x3F
    assert extract_sbox_input(7, value) == 0x03
    assert extract_sbox_input(3, value) == 0


def test_extract_sbox_input_bad_index():
    with pytest.raises(ValueError, match="invalid S-box index"):
        extract_sbox_input(8, 0)


def test_pad_sbox_output():
    assert pad_sbox_output(0, 0xF) == 0xF0000000
    assert pad_sbox_output(7, 0xA) == 0xA


def test_pad_sbox_output_bad_index():
    with pytest.raises(ValueError):
        pad_sbox_output(9, 1)


def test_rotate_left_28():
    assert rotate_left_28(1, 1) == 2
    assert rotate_left_28(0x8000000, 1) == 1
    assert rotate_left_28(0x8000000, 2) == 2
    assert rotate_left_28(0x1234567, 28) == 0x1234567