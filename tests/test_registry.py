import logging
import unittest

from arabcipher.core.alphabet import ARABIC_SYMBOLS, Alphabet
from arabcipher.core.errors import UNKNOWN_CIPHER_MESSAGE, ErrorKind, UnknownCipher
from arabcipher.core.registry import CipherKind, decrypt, encrypt, get_spec, list_ciphers


class TestCipherKind(unittest.TestCase):
    def test_canonical_names(self) -> None:
        expected = ["Shift", "Monoalphabetic", "Vigenère", "Rail-Fence", "Row-Transposition", "Double-Transposition"]
        self.assertEqual([k.display_name for k in CipherKind], expected)
        for name in expected:
            self.assertEqual(CipherKind.from_name(name).display_name, name)

    def test_name_normalization_and_aliases(self) -> None:
        self.assertIs(CipherKind.from_name("  shift "), CipherKind.SHIFT)
        self.assertIs(CipherKind.from_name("Vigenere"), CipherKind.VIGENERE)
        self.assertIs(CipherKind.from_name("rail fence"), CipherKind.RAIL_FENCE)
        self.assertIs(CipherKind.from_name("Shift-cipher"), CipherKind.SHIFT)
        self.assertIs(CipherKind.from_name("Monoalphabetic-cipher"), CipherKind.MONOALPHABETIC)

    def test_unknown_name(self) -> None:
        with self.assertRaises(UnknownCipher):
            CipherKind.from_name("Enigma")
        with self.assertRaises(UnknownCipher):
            get_spec("")


class TestRegistry(unittest.TestCase):
    def test_all_ciphers_registered_in_order(self) -> None:
        specs = list_ciphers()
        self.assertEqual([s.kind for s in specs], list(CipherKind))
        for spec in specs:
            self.assertTrue(spec.key_hint)

    def test_get_spec_by_kind_or_name(self) -> None:
        self.assertIs(get_spec(CipherKind.SHIFT), get_spec("Shift"))


class TestDispatch(unittest.TestCase):
    def test_shift(self) -> None:
        res = encrypt("Shift", "اب", "2")
        self.assertTrue(res.ok)
        self.assertEqual(res.text, "تث")
        self.assertEqual(res.message, "تث")
        self.assertEqual(res.operation, "encrypt")
        self.assertEqual(decrypt("Shift", "تث", " 2 ").text, "اب")

    def test_every_cipher_roundtrips(self) -> None:
        text = "ابتثجحخدذرزسشص"
        keys = {
            "Shift": "-5",
            "Monoalphabetic": ARABIC_SYMBOLS[::-1],
            "Vigenère": "مفتاح",
            "Rail-Fence": "3",
            "Row-Transposition": "مفتاح",
            "Double-Transposition": "مفتاح سر",
        }
        for name, key in keys.items():
            with self.subTest(cipher=name):
                enc = encrypt(name, text, key)
                self.assertTrue(enc.ok, enc.message)
                dec = decrypt(name, enc.text, key)
                self.assertTrue(dec.ok, dec.message)
                self.assertEqual(dec.text, text)

    def test_errors_are_returned_not_raised(self) -> None:
        cases = [
            ("Shift", "abc", ErrorKind.INVALID_KEY_FORMAT),
            ("Rail-Fence", "", ErrorKind.INVALID_KEY_FORMAT),
            ("Rail-Fence", "1", ErrorKind.INVALID_PARAMETER),
            ("Monoalphabetic", "ابت", ErrorKind.INVALID_KEY_LENGTH),
            ("Vigenère", "", ErrorKind.INVALID_PARAMETER),
            ("Row-Transposition", "", ErrorKind.INVALID_PARAMETER),
            ("Double-Transposition", "مفتاح", ErrorKind.INVALID_KEY_COUNT),
            ("Double-Transposition", "ا ب ت", ErrorKind.INVALID_KEY_COUNT),
        ]
        for name, key, kind in cases:
            for op in (encrypt, decrypt):
                with self.subTest(cipher=name, key=key, op=op.__name__):
                    res = op(name, "ابت", key)
                    self.assertFalse(res.ok)
                    self.assertIsNone(res.text)
                    self.assertIs(res.error.kind, kind)
                    self.assertEqual(res.message, res.error.message)

    def test_monoalphabetic_error_message_is_verbatim(self) -> None:
        res = encrypt("Monoalphabetic", "اب", "ابت")
        self.assertTrue(res.message.startswith("Error: Custom alphabet must have the same length"))

    def test_unknown_cipher(self) -> None:
        res = encrypt("Playfair", "اب", "2")
        self.assertFalse(res.ok)
        self.assertIs(res.error.kind, ErrorKind.UNKNOWN_CIPHER)
        self.assertEqual(res.message, UNKNOWN_CIPHER_MESSAGE)
        self.assertEqual(res.cipher_name, "Playfair")

    def test_to_dict(self) -> None:
        d = decrypt("Rail-Fence", "اتجبث", "2").to_dict()
        self.assertEqual(d["text"], "ابتثج")
        self.assertTrue(d["ok"])
        self.assertIsNone(d["error"])
        d = encrypt("Nope", "", "").to_dict()
        self.assertEqual(d["error"], "unknown_cipher")

    def test_logs_operations_and_errors_without_keys(self) -> None:
        key = "ظغفق"
        bad_key = "ئىؤ"
        with self.assertLogs("arabcipher.core.registry", level="DEBUG") as cm:
            self.assertTrue(encrypt("Vigenère", "ابت", key).ok)
            self.assertFalse(encrypt("Monoalphabetic", "ابت", bad_key).ok)

        levels = [r.levelno for r in cm.records]
        self.assertEqual(levels.count(logging.DEBUG), 2)
        self.assertEqual(levels.count(logging.INFO), 1)
        self.assertIn("Vigenère", cm.output[0])
        self.assertIn("invalid_key_length", cm.output[-1])
        for line in cm.output:
            self.assertNotIn(key, line)
            self.assertNotIn(bad_key, line)

    def test_unknown_cipher_is_logged_at_info(self) -> None:
        with self.assertLogs("arabcipher.core.registry", level="INFO") as cm:
            encrypt("Playfair", "اب", "2")
        self.assertEqual(len(cm.records), 1)
        self.assertEqual(cm.records[0].levelno, logging.INFO)
        self.assertIn("Playfair", cm.output[0])

    def test_injected_alphabet(self) -> None:
        latin = Alphabet("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
        self.assertEqual(encrypt("Shift", "ABC", "1", alphabet=latin).text, "BCD")
        res = encrypt("Monoalphabetic", "ABC", "ZYXWVUTSRQPONMLKJIHGFEDCBA", alphabet=latin)
        self.assertEqual(res.text, "ZYX")


if __name__ == "__main__":
    unittest.main()
