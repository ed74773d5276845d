import os
import tempfile
import threading
import time
import unittest
from concurrent.futures import ThreadPoolExecutor
from chirpy.core.locks import RWLock
from chirpy.services.database import ChirpyDB
from chirpy.services.passwords import BcryptHasher

class TestConcurrentWrites(unittest.TestCase):
    def setUp(self):
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.db = ChirpyDB(os.path.join(tmp.name, "database.json"), hasher=BcryptHasher(rounds=4))

    def test_parallel_chirps_get_distinct_ids(self):
        with ThreadPoolExecutor(max_workers=8) as pool:
            chirps = list(pool.map(lambda i: self.db.create_chirp(i % 3, f"chirp {i}"), range(40)))
        ids = sorted(c.id for c in chirps)
        self.assertEqual(ids, list(range(1, 41)))
        snap = self.db.load()
        self.assertEqual(len(snap.chirps), 40)
        self.assertEqual(snap.next_chirp_id, 41)

    def test_parallel_users_get_distinct_ids(self):
        with ThreadPoolExecutor(max_workers=8) as pool:
            users = list(pool.map(lambda i: self.db.create_user(f"user{i}@example.com", "pw"), range(16)))
        self.assertEqual(sorted(u.id for u in users), list(range(1, 17)))
        self.assertEqual(len(self.db.load().users), 16)

    def test_parallel_duplicate_registration_admits_one(self):
        results = []
        def register():
            try:
                results.append(self.db.create_user("same@example.com", "pw").id)
            except Exception as exc:
                results.append(type(exc).__name__)
        threads = [threading.Thread(target=register) for _ in range(6)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        self.assertEqual(results.count(1), 1)
        self.assertEqual(results.count("AlreadyExists"), 5)

class TestRWLock(unittest.TestCase):
    def test_readers_share(self):
        lock = RWLock()
        inside = threading.Barrier(3, timeout=2)
        def reader():
            with lock.read():
                inside.wait()
        threads = [threading.Thread(target=reader) for _ in range(3)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=5)
        self.assertFalse(inside.broken)

    def test_writer_excludes_readers(self):
        lock = RWLock()
        events = []
        writer_in = threading.Event()
        def writer():
            with lock.write():
                writer_in.set()
                time.sleep(0.1)
                events.append("write-done")
        def reader():
            writer_in.wait()
            with lock.read():
                events.append("read")
        w = threading.Thread(target=writer)
        r = threading.Thread(target=reader)
        w.start()
        r.start()
        w.join()
        r.join()
        self.assertEqual(events, ["write-done", "read"])

if __name__ == "__main__":
    unittest.main()
