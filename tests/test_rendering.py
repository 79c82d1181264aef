import pygame
import pytest

from nbodies import Body, SimulationConfig, Simulator, Universe
from nbodies.rendering import Renderer


@pytest.fixture
def dummy_video(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    yield
    pygame.quit()


def _universe():
    return Universe(
        [
            Body(5.0, [-1.0, 0.0], [0.0, 0.0], label="sun.png"),
            Body(5.0, [1.0, 0.0], [0.0, 0.0], label="missing.gif"),
        ],
        radius=2.0,
    )


def test_renderer_draws_frames(dummy_video, tmp_path):
    images = tmp_path / "images"
    images.mkdir()
    sprite = pygame.Surface((6, 6))
    sprite.fill((255, 200, 0))
    pygame.image.save(sprite, str(images / "sun.png"))

    universe = _universe()
    renderer = Renderer(universe, images_dir=images, size=(200, 200), frame_delay_ms=0)
    renderer.draw()
    assert renderer.background is None
    assert renderer._images["sun.png"] is not None
    assert renderer._images["missing.gif"] is None
    assert renderer.screen.get_at((50, 100))[:3] == (255, 200, 0)
    assert renderer.screen.get_at((150, 100))[:3] == (255, 255, 255)
    renderer.close()


def test_renderer_as_frame_hook(dummy_video, tmp_path):
    universe = _universe()
    renderer = Renderer(universe, images_dir=tmp_path, size=(100, 100), frame_delay_ms=0)
    frames = []
    original = renderer.draw

    def counting_draw(elapsed=0.0, steps=0):
        frames.append((elapsed, steps))
        original(elapsed, steps)

    renderer.draw = counting_draw
    Simulator(universe, SimulationConfig(180.0, 60.0), on_frame=renderer.on_frame).run()
    assert frames == [(60.0, 1), (120.0, 2), (180.0, 3)]
    assert renderer.caption == "N-Body Simulation - t = 3.00 min, step 3"
    renderer.close()


def test_close_shuts_pygame_down(dummy_video, tmp_path):
    renderer = Renderer(_universe(), images_dir=tmp_path, size=(50, 50), frame_delay_ms=0)
    assert pygame.get_init()
    renderer.close()
    assert not pygame.get_init()


def test_failed_window_setup_shuts_pygame_down(dummy_video, tmp_path, monkeypatch):
    def no_display(size):
        raise pygame.error("no video device")

    monkeypatch.setattr(pygame.display, "set_mode", no_display)
    with pytest.raises(pygame.error):
        Renderer(_universe(), images_dir=tmp_path)
    assert not pygame.get_init()
