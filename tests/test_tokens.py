import os
import tempfile
import unittest
from chirpy.services.database import ChirpyDB
from chirpy.services.errors import AlreadyRevoked

class TestRevocation(unittest.TestCase):
    def setUp(self):
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.db = ChirpyDB(os.path.join(tmp.name, "database.json"))

    def test_unknown_token_is_not_revoked(self):
        self.assertFalse(self.db.is_token_revoked("abc"))

    def test_revoke_twice(self):
        self.db.revoke_token("abc")
        self.assertTrue(self.db.is_token_revoked("abc"))
        with self.assertRaises(AlreadyRevoked):
            self.db.revoke_token("abc")
        self.assertTrue(self.db.is_token_revoked("abc"))
        self.assertEqual(len(self.db.load().revoked_tokens), 1)

    def test_revocation_survives_reopen(self):
        self.db.revoke_token("xyz")
        self.assertTrue(ChirpyDB(self.db.path).is_token_revoked("xyz"))
        self.assertFalse(ChirpyDB(self.db.path).is_token_revoked("xy"))

if __name__ == "__main__":
    unittest.main()
