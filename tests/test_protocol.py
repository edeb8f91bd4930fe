import pytest

from common.game import HandPlayed, InvalidOption, OutOfRange, ParseArgumentError
from common.protocol import (
    decode, encode_play, encode_text,
    CodecError, ParsingError, GameKindError,
    WIN_MESSAGE, LOSS_MESSAGE,
)


def test_decode_valid_payload():
    assert decode(b"1 3") == HandPlayed.even(3)
    assert decode(b"2 5") == HandPlayed.odd(5)


def test_decode_tolerates_surrounding_whitespace():
    # The client sends the raw line, trailing newline included
    assert decode(b"  2\t1 \n") == HandPlayed.odd(1)


def test_every_valid_payload_renders_back_to_its_tag_and_value():
    for code, tag in ((1, "Even"), (2, "Odd")):
        for value in range(1, 6):
            play = decode(f"{code} {value}".encode())
            assert str(play) == f"{tag}({value})"
            assert encode_play(play) == f"{code} {value}".encode()


@pytest.mark.parametrize("payload", [b"", b"1", b"   ", b"1 2 3", b"1 2 3 4"])
def test_decode_requires_exactly_two_arguments(payload):
    with pytest.raises(ParsingError) as exc:
        decode(payload)
    assert str(exc.value) == "You must pass exactly 2 arguments."


def test_decode_rejects_invalid_utf8():
    with pytest.raises(ParsingError) as exc:
        decode(b"\xff\xfe 1")
    assert "utf-8" in str(exc.value)
    assert isinstance(exc.value, CodecError)


@pytest.mark.parametrize("payload, error_type", [
    (b"3 1", InvalidOption),
    (b"1 9", OutOfRange),
    (b"one 1", ParseArgumentError),
])
def test_decode_wraps_game_errors_unchanged(payload, error_type):
    with pytest.raises(GameKindError) as exc:
        decode(payload)
    assert isinstance(exc.value.error, error_type)
    assert str(exc.value) == str(exc.value.error)


def test_result_messages():
    assert encode_text(WIN_MESSAGE) == b"You've win!!\nGame will refresh automatically!"
    assert encode_text(LOSS_MESSAGE) == b"You've lost!\nGame will refresh automatically!"


def test_decode_long_token_is_a_parse_error():
    with pytest.raises(GameKindError) as exc:
        decode(b"1 " + b"9" * 5000)
    assert isinstance(exc.value.error, ParseArgumentError)


def test_decode_zero_padded_value():
    assert decode(b"1 " + b"0" * 5000 + b"3") == HandPlayed.even(3)


@pytest.mark.parametrize("separator", [b"\x1c", b"\x1d", b"\x1e", b"\x1f"])
def test_control_separators_do_not_split_arguments(separator):
    with pytest.raises(ParsingError) as exc:
        decode(b"1" + separator + b"3")
    assert str(exc.value) == "You must pass exactly 2 arguments."


def test_unicode_whitespace_splits_arguments():
    assert decode("2\u30004\u2003".encode("utf-8")) == HandPlayed.odd(4)
