from lotto_backend.codes import generate_room_code
from lotto_backend.constants import ROOM_CODE_ALPHABET


def test_alphabet_excludes_ambiguous_characters():
    assert len(ROOM_CODE_ALPHABET) == 32
    assert len(set(ROOM_CODE_ALPHABET)) == 32
    for ch in "IO01":
        assert ch not in ROOM_CODE_ALPHABET


def test_generated_codes_are_unique_and_well_formed():
    codes = set()
    for _ in range(500):
        code = generate_room_code(codes)
        assert len(code) == 6
        assert set(code) <= set(ROOM_CODE_ALPHABET)
        assert code not in codes
        codes.add(code)


def test_redraws_whole_code_on_collision():
    draws = iter("AAAAAA" + "BBBBBB")

    def choice(_alphabet):
        return next(draws)

    assert generate_room_code({"AAAAAA"}, choice=choice) == "BBBBBB"
