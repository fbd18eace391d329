# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest

from fittrack.auth.security import TokenService, hash_password, verify_password


class TestPasswordHashing(unittest.TestCase):
    def test_round_trip(self) -> None:
        hashed = hash_password("password123")
        self.assertTrue(hashed.startswith("pbkdf2_sha256$"))
        self.assertTrue(verify_password("password123", hashed))
        self.assertFalse(verify_password("password124", hashed))

    def test_hashes_are_salted(self) -> None:
        self.assertNotEqual(hash_password("same"), hash_password("same"))

    def test_malformed_hash_does_not_verify(self) -> None:
        self.assertFalse(verify_password("x", "not-a-hash"))
        self.assertFalse(verify_password("x", "bcrypt$1$abc$def"))


class TestTokenService(unittest.TestCase):
    def test_issued_token_decodes(self) -> None:
        tokens = TokenService(secret="s1", ttl_days=1)
        payload = tokens.decode(tokens.create_access_token(user_id="u1", email="a@example.com"))
        self.assertEqual(payload["sub"], "u1")
        self.assertEqual(payload["email"], "a@example.com")
        self.assertEqual(payload["exp"] - payload["iat"], 24 * 60 * 60)

    def test_token_from_other_secret_is_rejected(self) -> None:
        token = TokenService(secret="s1").create_access_token(user_id="u1", email="a@example.com")
        with self.assertRaises(ValueError):
            TokenService(secret="s2").decode(token)

    def test_expired_token_is_rejected(self) -> None:
        tokens = TokenService(secret="s1", ttl_days=-1)
        token = tokens.create_access_token(user_id="u1", email="a@example.com")
        with self.assertRaises(ValueError):
            tokens.decode(token)

    def test_garbage_token_is_rejected(self) -> None:
        tokens = TokenService(secret="s1")
        for token in ("", "a.b", "a.b.c", "not a token"):
            with self.assertRaises(ValueError):
                tokens.decode(token)

    def test_empty_secret_is_refused(self) -> None:
        with self.assertRaises(ValueError):
            TokenService(secret="")


if __name__ == "__main__":
    unittest.main()
