
import argparse
import logging
import sys
import time
import pygame
from tetris_audio import open_audio
from tetris_bag import BlockBag
from tetris_config import CONFIG
from tetris_game import Game
from tetris_input import poll_key
from tetris_layout import compute_dims
from tetris_render import Hud, PygameRenderer, load_font


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Tetris")
    parser.add_argument('--seed', type=int, default=CONFIG["BAG_SEED"], help='Seed for the block bag')
    parser.add_argument('--mute', action='store_true', help='Disable sound cues and music')
    parser.add_argument('--sound-dir', default=CONFIG["SOUND_DIR"], help='Directory holding rotate/clear/music .mp3 files')
    parser.add_argument('--log-level', default=CONFIG["LOG_LEVEL"], choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])
    return parser.parse_args(argv)


def apply_args(args):
    CONFIG["BAG_SEED"] = args.seed
    CONFIG["MUTE"] = CONFIG["MUTE"] or args.mute
    CONFIG["SOUND_DIR"] = args.sound_dir
    CONFIG["LOG_LEVEL"] = args.log_level


def main(argv=None):
    apply_args(parse_args(argv))
    logging.basicConfig(level=CONFIG["LOG_LEVEL"], format='[TETRIS] %(asctime)s %(name)s - %(message)s')

    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])

    dims = compute_dims()
    screen = pygame.display.set_mode((dims.total_w, dims.total_h))
    pygame.display.set_caption("Tetris")
    renderer = PygameRenderer(screen)
    hud = Hud(dims, load_font())
    clock = pygame.time.Clock()
    audio = open_audio()

    game = Game(BlockBag(CONFIG["BAG_SEED"]), audio, time.monotonic())
    logging.info("started, seed=%s", CONFIG["BAG_SEED"])

    while True:
        clock.tick(CONFIG["FPS"])
        events = pygame.event.get()
        if any(e.type == pygame.QUIT for e in events):
            break
        game.handle_key(poll_key(events))
        game.update(time.monotonic())

        hud.draw_background(screen)
        hud.draw(screen, game.score, game.game_over)
        game.draw(renderer)
        pygame.display.flip()

    audio.close()
    pygame.quit()
    logging.info("quit, final score %d", game.score)
    return 0


if __name__ == '__main__':
    sys.exit(main())
