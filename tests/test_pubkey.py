import pytest

from exerciser.chain.pubkey import (
    MAX_SEEDS,
    Pubkey,
    b58decode,
    b58encode,
    create_program_address,
    find_program_address,
    is_on_curve,
)

PROGRAM_TEXT = "BG8eNGD8vvPpegz6NojiFS2n6yPHV5yt9LJngp1QCkFf"


def test_zero_key_is_all_ones():
    assert str(Pubkey()) == "1" * 32


@pytest.mark.parametrize(
    "data",
    [b"", b"\x00", b"\x00\x00\x05", b"hello world", bytes(range(32)), b"\xff" * 40],
)
def test_base58_round_trip(data):
    assert b58decode(b58encode(data)) == data


def test_leading_ones_decode_to_zero_bytes():
    assert b58decode("11") == b"\x00\x00"


@pytest.mark.parametrize("text", ["0", "O", "I", "l", "abc!"])
def test_base58_rejects_bad_characters(text):
    with pytest.raises(ValueError):
        b58decode(text)


def test_from_string_round_trip():
    key = Pubkey.from_string(PROGRAM_TEXT)
    assert str(key) == PROGRAM_TEXT
    assert Pubkey.from_string(str(key)) == key


def test_from_string_wrong_length():
    with pytest.raises(ValueError):
        Pubkey.from_string("abc")


def test_constructor_checks_length():
    with pytest.raises(ValueError):
        Pubkey(b"\x01")


def test_new_unique_keys_differ():
    first, second = Pubkey.new_unique(), Pubkey.new_unique()
    assert first != second
    assert len(bytes(first)) == 32


def test_identity_point_is_on_curve():
    assert is_on_curve(bytes([1]) + bytes(31))


def test_base_point_is_on_curve():
    base = bytes.fromhex("58" + "66" * 31)
    assert is_on_curve(base)


def test_wrong_length_is_not_on_curve():
    assert not is_on_curve(b"short")


def test_found_address_is_off_curve_and_reproducible():
    program_id = Pubkey.from_string(PROGRAM_TEXT)
    address, bump = find_program_address([b"seed"], program_id)
    assert 1 <= bump <= 255
    assert not is_on_curve(bytes(address))
    assert create_program_address([b"seed", bytes([bump])], program_id) == address


def test_higher_bumps_are_on_curve():
    program_id = Pubkey.from_string(PROGRAM_TEXT)
    _, bump = find_program_address([b"seed"], program_id)
    for higher in range(bump + 1, 256):
        with pytest.raises(ValueError):
            create_program_address([b"seed", bytes([higher])], program_id)


def test_find_is_deterministic_and_seed_sensitive():
    program_id = Pubkey.from_string(PROGRAM_TEXT)
    first = find_program_address([b"a", b"b"], program_id)
    assert find_program_address([b"a", b"b"], program_id) == first
    assert find_program_address([b"a", b"c"], program_id)[0] != first[0]


def test_pubkey_seed_equals_its_bytes():
    program_id = Pubkey.from_string(PROGRAM_TEXT)
    other = Pubkey.new_unique()
    assert find_program_address([other], program_id) == find_program_address(
        [bytes(other)], program_id
    )


def test_seed_too_long():
    program_id = Pubkey.new_unique()
    with pytest.raises(ValueError):
        create_program_address([bytes(33)], program_id)
    with pytest.raises(ValueError):
        find_program_address([bytes(33)], program_id)


def test_too_many_seeds():
    program_id = Pubkey.new_unique()
    with pytest.raises(ValueError):
        create_program_address([b"x"] * (MAX_SEEDS + 1), program_id)
    with pytest.raises(ValueError):
        find_program_address([b"x"] * MAX_SEEDS, program_id)