"""
Entry-point.  Keeps top-level script tiny.
"""
import logging, sys
import pygame
from sweep import config, gui
from sweep.constants import LOG_DIR

log = logging.getLogger("sweep")


def setup_logging(level: str) -> None:
    LOG_DIR.mkdir(exist_ok=True)
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[
            logging.FileHandler(LOG_DIR / "sweep.log"),
            logging.StreamHandler(sys.stdout),
        ],
    )


def main():
    cfg = config.load()
    setup_logging(cfg["log_level"])
    pygame.init()
    try:
        app = gui.SweepGUI(cfg)
    except pygame.error as exc:
        log.error("cannot open display: %s", exc)
        pygame.quit()
        return 1
    app.run()
    config.save(cfg)
    return 0

if __name__ == "__main__":
    sys.exit(main())
