import logging
import unittest
from chirpy.core.logging import setup_logging

class TestSetupLogging(unittest.TestCase):
    def setUp(self):
        root = logging.getLogger()
        saved = (root.level, list(root.handlers))
        def restore():
            root.setLevel(saved[0])
            root.handlers[:] = saved[1]
        self.addCleanup(restore)

    def test_single_handler_at_requested_level(self):
        setup_logging("debug")
        setup_logging("warning")
        root = logging.getLogger()
        self.assertEqual(root.level, logging.WARNING)
        self.assertEqual(len(root.handlers), 1)

    def test_unknown_level_falls_back_to_info(self):
        setup_logging("chatty")
        self.assertEqual(logging.getLogger().level, logging.INFO)

if __name__ == "__main__":
    unittest.main()
