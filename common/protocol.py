import re

from common.game import GameError, HandPlayed, PLAY_OPTION_EVEN, PLAY_OPTION_ODD

# Text protocol constants (shared by client and server)
BUFFER_SIZE = 1024
ENCODING = "utf-8"
ARGUMENT_COUNT = 2
# Unicode whitespace; the \x1c-\x1f control separators are not part of it
ARGUMENT_SEPARATOR = re.compile(r"[^\S\x1c-\x1f]+")

# Request payload (client -> server):
# "<option> <value>"   option: 1=Even, 2=Odd   value: 1..5
# Response payload (server -> client): error text or one of the results below
WIN_MESSAGE = "You've win!!\nGame will refresh automatically!"
LOSS_MESSAGE = "You've lost!\nGame will refresh automatically!"


class CodecError(Exception):
    """Raised when a request payload cannot be turned into a play."""


class ParsingError(CodecError):
    def __init__(self, description: str):
        super().__init__(description)
        self.description = description

    def __str__(self):
        return self.description


class GameKindError(CodecError):
    # Wraps a game validation error; the text is the game error's own text
    def __init__(self, error: GameError):
        super().__init__(error)
        self.error = error

    def __str__(self):
        return str(self.error)


def decode(data: bytes) -> HandPlayed:
    # Parse a request payload into a validated play
    try:
        text = data.decode(ENCODING)
    except UnicodeDecodeError as e:
        raise ParsingError(str(e)) from e

    options = [option for option in ARGUMENT_SEPARATOR.split(text) if option]
    if len(options) != ARGUMENT_COUNT:
        raise ParsingError(f"You must pass exactly {ARGUMENT_COUNT} arguments.")

    try:
        return HandPlayed.from_text(options[0], options[1])
    except GameError as e:
        raise GameKindError(e) from e


def encode_play(play: HandPlayed) -> bytes:
    return encode_text(f"{play.option} {play.value()}")


def encode_text(text: str) -> bytes:
    return text.encode(ENCODING)
