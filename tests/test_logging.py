import contextlib
import io
import os
import tempfile
import threading
import unittest

from sparsepoly import logging
from sparsepoly import opts

class TestLogging(unittest.TestCase):

    def capture(self, f):
        buf = io.StringIO()
        with contextlib.redirect_stderr(buf):
            f()
        return buf.getvalue()

    def test_quiet_by_default(self):
        def work():
            with logging.task("quiet"):
                logging.event("nothing to see")
        self.assertEqual(self.capture(work), "")

    def test_verbose(self):
        def work():
            with logging.task("outer", n=1):
                with logging.task("inner"):
                    logging.event("hello")
        with opts.override(verbose=True):
            out = self.capture(work).splitlines()
        self.assertEqual(out[0], "outer [n=1]...")
        self.assertEqual(out[1], "  inner...")
        self.assertEqual(out[2], "    hello")
        assert out[3].startswith("  Finished inner")
        assert out[4].startswith("Finished outer")

    def test_task_ends_on_error(self):
        with self.assertRaises(RuntimeError):
            with logging.task("failing"):
                raise RuntimeError()
        with opts.override(verbose=True):
            out = self.capture(lambda: logging.event("after"))
        self.assertEqual(out, "after\n")

    def test_threads_have_own_stacks(self):
        depths = []
        def work():
            with logging.task("in thread"):
                depths.append(len(logging._stack()))
        with logging.task("main"):
            t = threading.Thread(target=work)
            t.start()
            t.join()
            self.assertEqual(len(logging._stack()), 1)
        self.assertEqual(depths, [1])

    def test_profile(self):
        with logging.task("profiled"):
            pass
        self.assertIn(("profiled",), logging.profile())
        fd, path = tempfile.mkstemp()
        os.close(fd)
        try:
            logging.dump_profile(path)
            with open(path) as f:
                contents = f.read()
        finally:
            os.remove(path)
        assert contents.startswith("Total duration:")
        self.assertIn("profiled", contents)
