"""Scrolling starfield demo with keyboard-triggered drum sounds."""

import pygame

from .clock import Time
from .input import InputSystem
from .renderer import Renderer
from .rng import random_float, random_int
from .vector2 import Vector2

SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 1024
STAR_COUNT = 100
STAR_SPEED = (-140.0, 0.0)
AUDIO_CHANNELS = 32
DRUM_FILES = ("bass.wav", "snare.wav", "clap.wav", "close-hat.wav", "open-hat.wav")
DRUM_KEYS = (pygame.K_a, pygame.K_s, pygame.K_d, pygame.K_f, pygame.K_g)
INTRO_FILE = "test.wav"


def create_stars(count, width, height):
    """Scatter ``count`` stars uniformly over a ``width`` x ``height`` area."""
    return [Vector2(random_float() * width, random_float() * height) for _ in range(count)]


def update_stars(stars, speed, dt, width):
    """Move stars in place, wrapping them horizontally across ``[0, width]``."""
    step = speed * dt
    for star in stars:
        star += step
        if star.x > width:
            star.x = 0
        if star.x < 0:
            star.x = width


def _open_audio():
    try:
        pygame.mixer.init()
    except pygame.error:
        return False
    pygame.mixer.set_num_channels(AUDIO_CHANNELS)
    return True


def _load_sound(path):
    try:
        return pygame.mixer.Sound(path)
    except (pygame.error, OSError):
        return None


def main(argv=None):
    """Run the demo until the window is closed."""
    clock = Time()

    renderer = Renderer()
    renderer.initialize()
    renderer.create_window("Viper Engine", SCREEN_WIDTH, SCREEN_HEIGHT)

    input_system = InputSystem()
    input_system.initialize()

    audio = _open_audio()
    drums = [_load_sound(name) if audio else None for name in DRUM_FILES]
    if audio:
        intro = _load_sound(INTRO_FILE)
        if intro is not None:
            intro.play()

    stars = create_stars(STAR_COUNT, SCREEN_WIDTH, SCREEN_HEIGHT)
    speed = Vector2(*STAR_SPEED)

    running = True
    try:
        while running:
            clock.tick()
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False

            input_system.update()
            for key, sound in zip(DRUM_KEYS, drums):
                if sound is not None and input_system.key_pressed(key):
                    sound.play()

            renderer.set_color(0, 0, 0)
            renderer.clear()

            update_stars(stars, speed, clock.delta_time, SCREEN_WIDTH)
            for star in stars:
                renderer.set_color(random_int(256), random_int(256), random_int(256))
                renderer.draw_point(star.x, star.y)

            renderer.present()
    finally:
        if audio:
            pygame.mixer.quit()
        renderer.shutdown()

    return 0