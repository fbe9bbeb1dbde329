import logging
import os
import tempfile
import unittest

import hexmesh
from hexmesh.logging_config import setup_logging


class TestSetupLogging(unittest.TestCase):

    def tearDown(self):
        logger = logging.getLogger('hexmesh')
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)

    def test_console_handler_only(self):
        logger = setup_logging(level=logging.DEBUG)
        self.assertEqual(logger.name, 'hexmesh')
        self.assertEqual(logger.level, logging.DEBUG)
        self.assertEqual(len(logger.handlers), 1)

    def test_exposed_for_embedding_applications(self):
        self.assertIs(hexmesh.setup_logging, setup_logging)

    def test_repeated_setup_does_not_duplicate_handlers(self):
        setup_logging()
        logger = setup_logging()
        self.assertEqual(len(logger.handlers), 1)

    def test_log_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'hexmesh.log')
            logger = setup_logging(log_file=path)
            logging.getLogger('hexmesh.io.legacy_vtk').info('loaded')
            for handler in logger.handlers:
                handler.flush()
            self.tearDown()
            with open(path, encoding='utf-8') as f:
                content = f.read()
        self.assertIn('Logging initialized.', content)
        self.assertIn('hexmesh.io.legacy_vtk - INFO - loaded', content)


if __name__ == '__main__':
    unittest.main()
