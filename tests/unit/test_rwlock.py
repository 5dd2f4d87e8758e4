"""
Unit tests for ReadWriteLock
"""

import threading
import time
import unittest

from enilimits.utils.rwlock import ReadWriteLock

class TestReadWriteLock(unittest.TestCase):
    """Test ReadWriteLock class"""

    def setUp(self):
        """Set up for tests"""
        self.lock = ReadWriteLock()

    def test_concurrent_readers(self):
        """Test readers do not block each other"""
        both_inside = threading.Barrier(2, timeout=5)
        errors = []

        def reader():
            with self.lock.read_locked():
                try:
                    both_inside.wait()
                except threading.BrokenBarrierError as e:
                    errors.append(e)

        threads = [threading.Thread(target=reader) for _ in range(2)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=10)

        self.assertEqual(errors, [])

    def test_writer_excludes_readers(self):
        """Test a reader waits for the writer to finish"""
        events = []
        writer_inside = threading.Event()

        def writer():
            with self.lock.write_locked():
                writer_inside.set()
                time.sleep(0.1)
                events.append("writer done")

        def reader():
            writer_inside.wait(timeout=5)
            with self.lock.read_locked():
                events.append("reader")

        writer_thread = threading.Thread(target=writer)
        reader_thread = threading.Thread(target=reader)
        writer_thread.start()
        reader_thread.start()
        writer_thread.join(timeout=10)
        reader_thread.join(timeout=10)

        self.assertEqual(events, ["writer done", "reader"])

    def test_writer_waits_for_readers(self):
        """Test a writer waits until the active reader releases"""
        events = []
        reader_inside = threading.Event()

        def reader():
            with self.lock.read_locked():
                reader_inside.set()
                time.sleep(0.1)
                events.append("reader done")

        def writer():
            reader_inside.wait(timeout=5)
            with self.lock.write_locked():
                events.append("writer")

        reader_thread = threading.Thread(target=reader)
        writer_thread = threading.Thread(target=writer)
        reader_thread.start()
        writer_thread.start()
        reader_thread.join(timeout=10)
        writer_thread.join(timeout=10)

        self.assertEqual(events, ["reader done", "writer"])

    def test_waiting_writer_blocks_new_readers(self):
        """Test new readers queue behind a waiting writer"""
        events = []
        self.lock.acquire_read()

        def writer():
            with self.lock.write_locked():
                events.append("writer")

        def reader():
            with self.lock.read_locked():
                events.append("reader")

        writer_thread = threading.Thread(target=writer)
        writer_thread.start()
        # Wait until the writer is queued
        deadline = time.time() + 5
        while not self.lock._waiting_writers and time.time() < deadline:
            time.sleep(0.01)

        reader_thread = threading.Thread(target=reader)
        reader_thread.start()
        time.sleep(0.05)
        self.assertEqual(events, [])

        self.lock.release_read()
        writer_thread.join(timeout=10)
        reader_thread.join(timeout=10)

        self.assertEqual(events, ["writer", "reader"])

    def test_release_without_hold(self):
        """Test releasing an unheld lock raises RuntimeError"""
        with self.assertRaises(RuntimeError):
            self.lock.release_read()
        with self.assertRaises(RuntimeError):
            self.lock.release_write()

    def test_released_on_exception(self):
        """Test context managers release the lock when the body raises"""
        with self.assertRaises(ValueError):
            with self.lock.write_locked():
                raise ValueError("boom")

        # Would block forever if the write hold leaked
        with self.lock.read_locked():
            pass

if __name__ == "__main__":
    unittest.main()
