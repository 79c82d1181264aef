"""Background soundtrack playback through ``pygame.mixer``."""
import logging
from pathlib import Path

import pygame

from . import constants as C

logger = logging.getLogger(__name__)


def play_soundtrack(path=C.SOUNDTRACK_FILE) -> bool:
    """Loop ``path`` in the background.

    Returns ``False`` and logs a warning when the file is missing or no audio
    device is available; the simulation does not depend on the soundtrack.
    """
    path = Path(path)
    if not path.is_file():
        logger.warning("Soundtrack %s not found, running without audio", path)
        return False
    try:
        pygame.mixer.init()
        pygame.mixer.music.load(str(path))
        pygame.mixer.music.play(loops=-1)
    except pygame.error as exc:
        logger.warning("Cannot play soundtrack %s: %s", path, exc)
        return False
    logger.debug("Playing soundtrack %s", path)
    return True


def stop_soundtrack() -> None:
    if pygame.mixer.get_init():
        pygame.mixer.music.stop()
        pygame.mixer.quit()
