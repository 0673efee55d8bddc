import pygame
import pytest

from viper_engine.renderer import Renderer, RendererError


@pytest.fixture
def dummy_video(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")


@pytest.fixture
def renderer(dummy_video):
    r = Renderer()
    r.initialize()
    r.create_window("Test Window", 32, 24)
    yield r
    r.shutdown()


def test_window_has_requested_size_and_title(renderer):
    assert renderer.surface.get_size() == (32, 24)
    assert pygame.display.get_caption()[0] == "Test Window"


def test_clear_fills_with_current_color(renderer):
    renderer.set_color(255, 0, 0)
    renderer.clear()
    assert renderer.surface.get_at((0, 0)) == (255, 0, 0, 255)
    assert renderer.surface.get_at((31, 23)) == (255, 0, 0, 255)


def test_draw_point_sets_single_pixel(renderer):
    renderer.set_color(0, 0, 0)
    renderer.clear()
    renderer.set_color(0, 255, 0)
    renderer.draw_point(5.0, 6.0)
    renderer.present()
    assert renderer.surface.get_at((5, 6)) == (0, 255, 0, 255)
    assert renderer.surface.get_at((6, 6)) == (0, 0, 0, 255)


def test_draw_point_outside_window_changes_nothing(renderer):
    renderer.set_color(0, 0, 0)
    renderer.clear()
    renderer.set_color(0, 255, 0)
    renderer.draw_point(500.0, -3.0)
    assert renderer.surface.get_at((0, 0)) == (0, 0, 0, 255)


def test_draw_line_horizontal(renderer):
    renderer.set_color(0, 0, 0)
    renderer.clear()
    renderer.set_color(0, 0, 255)
    renderer.draw_line(0, 10, 31, 10)
    assert renderer.surface.get_at((15, 10)) == (0, 0, 255, 255)
    assert renderer.surface.get_at((15, 12)) == (0, 0, 0, 255)


@pytest.mark.parametrize("color", [(256, 0, 0), (0, -1, 0), (0, 0, 300)])
def test_set_color_out_of_range(renderer, color):
    with pytest.raises(ValueError):
        renderer.set_color(*color)


def test_drawing_without_window_raises(dummy_video):
    r = Renderer()
    r.initialize()
    try:
        with pytest.raises(RendererError):
            r.clear()
        with pytest.raises(RendererError):
            r.draw_point(1, 1)
        with pytest.raises(RendererError):
            r.present()
    finally:
        r.shutdown()


def test_negative_window_size_raises(dummy_video):
    r = Renderer()
    r.initialize()
    with pytest.raises(RendererError):
        r.create_window("Bad", -1, -1)
    assert not pygame.display.get_init()


def test_shutdown_closes_display(dummy_video):
    r = Renderer()
    r.initialize()
    r.create_window("Closing", 8, 8)
    r.shutdown()
    assert not pygame.display.get_init()
    with pytest.raises(RendererError):
        r.draw_line(0, 0, 1, 1)