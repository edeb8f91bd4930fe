from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

# Option codes sent on the wire (shared by client and server)
PLAY_OPTION_EVEN = 1
PLAY_OPTION_ODD = 2

MIN_VALUE = 1
MAX_VALUE = 5

# Unsigned 8-bit integer: optional '+', decimal digits only
_U8_RE = re.compile(r"\+?[0-9]+")
U8_MAX = 255


class GameError(Exception):
    """Base class for every rejected play or invalid game operation."""


class InvalidOption(GameError):
    def __init__(self, code: int):
        super().__init__(code)
        self.code = code

    def __str__(self):
        return f"{self.code} is not a valid option. The options are: 1 for Even and 2 for Odd"


class OutOfRange(GameError):
    def __init__(self, value: int):
        super().__init__(value)
        self.value = value

    def __str__(self):
        return f"{self.value} is out of range. The number must be from {MIN_VALUE} to {MAX_VALUE}."


class AlreadyContainAddress(GameError):
    def __str__(self):
        return "The game already contain your play. Wait for other player."


class PlayOptionAlreadyTaken(GameError):
    def __init__(self, play: HandPlayed):
        super().__init__(play)
        self.play = play

    def __str__(self):
        return f"You tried to play '{self.play}' but this play option was already taken. Choose the other."


class MissingPlayerPlay(GameError):
    def __init__(self, play: HandPlayed):
        super().__init__(play)
        self.play = play

    def __str__(self):
        return f"Cannot guess now, Missing the player option: {self.play}."


class ParseArgumentError(GameError):
    def __init__(self, detail: Optional[str] = None):
        super().__init__(detail)
        self.detail = detail

    def __str__(self):
        if self.detail:
            return f"Error parsing arguments. Cause: {self.detail}"
        return "Error parsing arguments."


class Parity(Enum):
    EVEN = "Even"
    ODD = "Odd"


@dataclass(frozen=True)
class HandPlayed:
    parity: Parity
    number: int

    @classmethod
    def new(cls, option: int, value: int) -> HandPlayed:
        # Range is checked before the option code
        if not (MIN_VALUE <= value <= MAX_VALUE):
            raise OutOfRange(value)

        if option == PLAY_OPTION_EVEN:
            return cls(Parity.EVEN, value)
        if option == PLAY_OPTION_ODD:
            return cls(Parity.ODD, value)
        raise InvalidOption(option)

    @classmethod
    def from_text(cls, option: str, value: str) -> HandPlayed:
        return cls.new(_parse_u8(option), _parse_u8(value))

    @classmethod
    def even(cls, value: int) -> HandPlayed:
        return cls(Parity.EVEN, value)

    @classmethod
    def odd(cls, value: int) -> HandPlayed:
        return cls(Parity.ODD, value)

    @property
    def option(self) -> int:
        return PLAY_OPTION_EVEN if self.parity is Parity.EVEN else PLAY_OPTION_ODD

    def value(self) -> int:
        return self.number

    def __str__(self):
        return f"{self.parity.value}({self.number})"


def _parse_u8(text: str) -> int:
    if not text:
        raise ParseArgumentError("cannot parse integer from empty string")
    if not _U8_RE.fullmatch(text):
        raise ParseArgumentError("invalid digit found in string")
    digits = text.lstrip("+").lstrip("0") or "0"
    if len(digits) > len(str(U8_MAX)) or int(digits) > U8_MAX:
        raise ParseArgumentError("number too large to fit in target type")
    return int(digits)


@dataclass(frozen=True)
class Player:
    address: Any
    hand_played: HandPlayed


@dataclass(frozen=True)
class RoundResult:
    winner: Player
    loser: Player


class Game:
    """
    One round of Even/Odd between two senders.

    Each slot holds at most one player and an address may hold only one slot.
    The round is decided by the parity of the sum of both numbers: an even sum
    makes the Even player the winner, an odd sum the Odd player.
    Addresses only need to support ``==``.
    """

    def __init__(self):
        self.even: Optional[Player] = None
        self.odd: Optional[Player] = None

    def add_play(self, play: HandPlayed, address) -> None:
        if self.contain_address(address):
            raise AlreadyContainAddress()

        if play.parity is Parity.EVEN:
            if self.even is None:
                self.even = Player(address, play)
                return
        elif self.odd is None:
            self.odd = Player(address, play)
            return

        raise PlayOptionAlreadyTaken(play)

    def contain_address(self, address) -> bool:
        return any(
            player is not None and player.address == address
            for player in (self.even, self.odd)
        )

    def can_guess(self) -> bool:
        return self.even is not None and self.odd is not None

    def guess_winner(self) -> RoundResult:
        if self.even is None:
            raise MissingPlayerPlay(HandPlayed.even(0))
        if self.odd is None:
            raise MissingPlayerPlay(HandPlayed.odd(0))

        total = self.even.hand_played.value() + self.odd.hand_played.value()
        if total % 2 == 0:
            return RoundResult(winner=self.even, loser=self.odd)
        return RoundResult(winner=self.odd, loser=self.even)

    def reset(self) -> None:
        self.even = None
        self.odd = None
