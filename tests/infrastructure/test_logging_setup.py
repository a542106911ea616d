import logging
import os
import unittest
from unittest import mock

from dispatchcore.infrastructure._logging import (
    LOG_LEVEL_ENV,
    ROOT_LOGGER_NAME,
    configure_logging,
    get_logger,
)


class TestLoggingSetup(unittest.TestCase):
    def setUp(self) -> None:
        self.root = logging.getLogger(ROOT_LOGGER_NAME)
        self._saved_level = self.root.level
        self._saved_handlers = list(self.root.handlers)

    def tearDown(self) -> None:
        for handler in list(self.root.handlers):
            self.root.removeHandler(handler)
        for handler in self._saved_handlers:
            self.root.addHandler(handler)
        self.root.setLevel(self._saved_level)

    def _stream_handlers(self):
        return [
            h for h in self.root.handlers if isinstance(h, logging.StreamHandler)
        ]

    def test_get_logger_nests_under_package(self):
        self.assertEqual(get_logger("dispatchcore.x").name, "dispatchcore.x")
        self.assertEqual(get_logger("pipeline").name, "dispatchcore.pipeline")
        self.assertIs(get_logger(ROOT_LOGGER_NAME), self.root)

    def test_library_installs_null_handler(self):
        self.assertTrue(
            any(isinstance(h, logging.NullHandler) for h in self.root.handlers)
        )

    def test_explicit_level(self):
        configure_logging("debug")
        self.assertEqual(self.root.level, logging.DEBUG)
        self.assertEqual(len(self._stream_handlers()), 1)

    def test_level_from_environment(self):
        with mock.patch.dict(os.environ, {LOG_LEVEL_ENV: "ERROR"}):
            configure_logging()
        self.assertEqual(self.root.level, logging.ERROR)

    def test_default_level_is_warning(self):
        env = {k: v for k, v in os.environ.items() if k != LOG_LEVEL_ENV}
        with mock.patch.dict(os.environ, env, clear=True):
            configure_logging()
        self.assertEqual(self.root.level, logging.WARNING)

    def test_repeated_configuration_does_not_stack_handlers(self):
        configure_logging(logging.INFO)
        configure_logging(logging.DEBUG)
        handlers = self._stream_handlers()
        self.assertEqual(len(handlers), 1)
        self.assertEqual(handlers[0].level, logging.DEBUG)

    def test_unknown_level_raises(self):
        with self.assertRaises(ValueError):
            configure_logging("chatty")


if __name__ == "__main__":
    unittest.main()
