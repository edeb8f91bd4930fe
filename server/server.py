import logging

from common.config import Config, parse_address
from common.game import Game, GameError
from common.protocol import (
    decode, encode_text, CodecError,
    WIN_MESSAGE, LOSS_MESSAGE,
)
from common.transport import Transport, UdpTransport

logger = logging.getLogger(__name__)


def reply_error(transport: Transport, error: Exception, address):
    transport.send_to(encode_text(str(error)), address)


def finish_round(game: Game, transport: Transport):
    try:
        result = game.guess_winner()
    except GameError as e:
        # can_guess() was true, so the slots are inconsistent; round left as-is
        logger.error(f"Could not decide round winner: {e}")
        return

    logger.info(
        f"Round finished: winner {result.winner.address} {result.winner.hand_played}, "
        f"loser {result.loser.address} {result.loser.hand_played}"
    )
    transport.send_to(encode_text(WIN_MESSAGE), result.winner.address)
    transport.send_to(encode_text(LOSS_MESSAGE), result.loser.address)
    game.reset()
    logger.info("Game refresh!")


def handle_datagram(game: Game, transport: Transport, data: bytes, source):
    logger.debug(f"Data received from \"{source}\" : {data!r}")

    try:
        hand_played = decode(data)
    except CodecError as e:
        logger.info(f"Bad payload from {source}: {e}")
        reply_error(transport, e, source)
        return

    try:
        game.add_play(hand_played, source)
    except GameError as e:
        logger.info(f"Play {hand_played} from {source} rejected: {e}")
        reply_error(transport, e, source)
        return

    logger.info(f"Play {hand_played} registered for {source}")
    if game.can_guess():
        finish_round(game, transport)


def serve(game: Game, transport: Transport):
    # Strictly sequential: each datagram is fully handled before the next receive
    while True:
        data, source = transport.receive()
        handle_datagram(game, transport, data, source)


def run_server(address: str = Config.SERVER_ADDRESS):
    game = Game()

    with UdpTransport(parse_address(address)) as transport:
        print("Even and Odd Game!\nServer running and waiting for connections.")
        logger.info(f"Listening on UDP {transport.address}")
        try:
            serve(game, transport)
        except KeyboardInterrupt:
            print("\nServer stopped.")


def main():
    logging.basicConfig(level=Config.LOG_LEVEL)
    run_server()


if __name__ == "__main__":
    main()
