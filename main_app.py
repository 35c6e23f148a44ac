"""
Night Sky - Main Application

Animated terminal night sky:
- Twinkling star field sized to the terminal
- Occasional shooting stars
- Rare blinking satellites

Controls: [Q] or [ESC] quit. Resizing the terminal re-seeds the sky.
"""

import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Optional

import numpy as np

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from sky.night_sky import NightSky
from terminal.screen import EventKind, InputEvent, TerminalError, TerminalScreen

logger = logging.getLogger(__name__)

TITLE = "Night Sky"


class AppState(Enum):
    RUNNING = "running"
    TERMINATED = "terminated"


class NightSkyApp:
    """
    Main application

    Runs the tick loop: poll input, update the sky, render, draw.
    """

    def __init__(self, screen: TerminalScreen,
                 rng: Optional[np.random.Generator] = None):
        """
        Args:
            screen: Opened terminal screen
            rng: Random generator shared by every sky this app creates
        """
        self.screen = screen
        self.rng = rng if rng is not None else np.random.default_rng()
        area = screen.viewport()
        self.sky = NightSky(area.width, area.height, self.rng)
        self.state = AppState.RUNNING

    def handle_event(self, event: InputEvent):
        """Apply a quit or resize event"""
        if event.kind is EventKind.QUIT:
            self.state = AppState.TERMINATED
        elif event.kind is EventKind.RESIZE:
            # old sky is dropped entirely before the next draw
            self.sky = NightSky(event.width, event.height, self.rng)
            logger.debug("Sky re-seeded for %dx%d", event.width, event.height)

    def tick(self):
        """One loop iteration"""
        event = self.screen.poll_event()
        if event is not None:
            self.handle_event(event)
        if self.state is not AppState.RUNNING:
            return

        self.sky.update()
        self.screen.draw(self.sky.render(self.screen.viewport()))

    def run(self):
        """Main loop, returns once the user quits"""
        while self.state is AppState.RUNNING:
            self.tick()


def main():
    """Entry point"""
    logging.basicConfig(level=logging.WARNING,
                        format='%(asctime)s - %(levelname)s - %(message)s')
    screen = TerminalScreen()
    try:
        with screen:
            NightSkyApp(screen).run()
    except KeyboardInterrupt:
        print("\nInterrupted by user")
        sys.exit(0)
    except TerminalError as e:
        print(f"\nTERMINAL ERROR: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"\nFATAL ERROR: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        sys.exit(1)

    print(f"{TITLE}: good night!")


if __name__ == "__main__":
    main()
