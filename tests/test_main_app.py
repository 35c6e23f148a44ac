import unittest
from unittest.mock import patch

import numpy as np

import main_app
from core.types import Viewport
from main_app import AppState, NightSkyApp
from terminal.screen import EventKind, InputEvent, TerminalError


class FakeScreen:
    """Scripted terminal: replays events, records drawn frames."""

    def __init__(self, events, width=40, height=20):
        self.events = list(events)
        self.area = Viewport(0, 0, width, height)
        self.frames = []

    def viewport(self):
        return self.area

    def poll_event(self):
        if not self.events:
            return InputEvent(EventKind.QUIT)
        event = self.events.pop(0)
        if event is not None and event.kind is EventKind.RESIZE:
            self.area = Viewport(0, 0, event.width, event.height)
        return event

    def draw(self, frame):
        self.frames.append(frame)


class TestNightSkyApp(unittest.TestCase):

    def make_app(self, events, **kwargs):
        screen = FakeScreen(events, **kwargs)
        return NightSkyApp(screen, np.random.default_rng(21)), screen

    def test_sky_sized_to_terminal(self):
        app, _ = self.make_app([], width=100, height=40)
        self.assertEqual((app.sky.width, app.sky.height), (100, 40))
        self.assertEqual(len(app.sky.stars), 200)
        self.assertIs(app.state, AppState.RUNNING)

    def test_default_generator_is_created(self):
        app = NightSkyApp(FakeScreen([]))
        self.assertIsInstance(app.rng, np.random.Generator)
        self.assertIs(app.sky.rng, app.rng)

    def test_quit_stops_before_update(self):
        app, screen = self.make_app([InputEvent(EventKind.QUIT)])
        app.run()
        self.assertIs(app.state, AppState.TERMINATED)
        self.assertEqual(screen.frames, [])
        self.assertEqual(app.sky.frame_count, 0)

    def test_idle_ticks_update_and_draw(self):
        app, screen = self.make_app([None, None, None])
        app.run()
        self.assertEqual(len(screen.frames), 3)
        self.assertEqual(app.sky.frame_count, 3)
        self.assertEqual(screen.frames[-1].viewport, Viewport(0, 0, 40, 20))

    def test_resize_replaces_sky_then_ticks(self):
        app, screen = self.make_app([])
        old_sky = app.sky
        screen.events = [InputEvent(EventKind.RESIZE, 60, 30)]
        app.tick()

        self.assertIsNot(app.sky, old_sky)
        self.assertEqual((app.sky.width, app.sky.height), (60, 30))
        self.assertEqual(len(app.sky.stars), 90)
        self.assertEqual(app.sky.frame_count, 1)
        self.assertEqual(screen.frames[-1].viewport, Viewport(0, 0, 60, 30))
        self.assertIs(app.sky.rng, app.rng)


class TestMain(unittest.TestCase):

    @patch('main_app.logging.basicConfig')
    @patch('main_app.TerminalScreen')
    def test_terminal_error_exits_with_status_1(self, mock_screen_cls, mock_basic_config):
        mock_screen_cls.return_value.__enter__.side_effect = TerminalError("no tty")
        with patch('sys.stderr'):
            with self.assertRaises(SystemExit) as cm:
                main_app.main()
        self.assertEqual(cm.exception.code, 1)

    @patch('main_app.logging.basicConfig')
    @patch('main_app.NightSkyApp')
    @patch('main_app.TerminalScreen')
    def test_keyboard_interrupt_exits_cleanly(self, mock_screen_cls, mock_app_cls, mock_basic_config):
        mock_app_cls.return_value.run.side_effect = KeyboardInterrupt
        with patch('sys.stdout'):
            with self.assertRaises(SystemExit) as cm:
                main_app.main()
        self.assertEqual(cm.exception.code, 0)
        mock_screen_cls.return_value.__exit__.assert_called_once()

    @patch('main_app.logging.basicConfig')
    @patch('main_app.NightSkyApp')
    @patch('main_app.TerminalScreen')
    def test_normal_quit_restores_terminal(self, mock_screen_cls, mock_app_cls, mock_basic_config):
        with patch('sys.stdout'):
            main_app.main()
        mock_app_cls.return_value.run.assert_called_once()
        mock_screen_cls.return_value.__exit__.assert_called_once()


if __name__ == '__main__':
    unittest.main()
