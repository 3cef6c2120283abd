"""
Tests for barcode, relevance, NFC and localization value objects.
"""

import json
import unittest

from wallet_pass_generator import (
    Barcode, BarcodeType, JsonWriter, Localizations, Nfc, RelevantBeacon, RelevantLocation
)


def write(value) -> dict:
    writer = JsonWriter()
    value.write(writer)
    return json.loads(writer.getvalue())


class TestValueObjects(unittest.TestCase):

    def test_barcode(self):
        self.assertEqual(write(Barcode(BarcodeType.QR, "12345")), {
            "format": "PKBarcodeFormatQR",
            "message": "12345",
            "messageEncoding": "iso-8859-1",
        })
        self.assertEqual(write(Barcode(BarcodeType.CODE128, "12345", "utf-8", "12345"))["altText"], "12345")

    def test_location(self):
        self.assertEqual(write(RelevantLocation(37.33182, -122.03118)), {
            "latitude": 37.33182, "longitude": -122.03118
        })
        location = RelevantLocation(37.33182, -122.03118, "Store nearby", altitude=12.5)
        self.assertEqual(list(write(location)), ["latitude", "longitude", "altitude", "relevantText"])

    def test_beacon_minor_needs_major(self):
        self.assertEqual(write(RelevantBeacon("uuid", minor=7)), {"proximityUUID": "uuid"})
        self.assertEqual(write(RelevantBeacon("uuid", "Hi", 1, 7)), {
            "proximityUUID": "uuid", "relevantText": "Hi", "major": 1, "minor": 7
        })
        self.assertEqual(write(RelevantBeacon("uuid", major=0)), {"proximityUUID": "uuid", "major": 0})

    def test_nfc(self):
        self.assertEqual(write(Nfc("msg")), {"message": "msg"})
        self.assertEqual(write(Nfc("msg", "key", True)), {
            "message": "msg", "encryptionPublicKey": "key", "requiresAuthentication": True
        })


class TestLocalizations(unittest.TestCase):

    def test_keys_are_case_insensitive_within_a_language(self):
        localizations = Localizations()
        localizations.add("fr", "Gate", "Porte")
        localizations.add("fr", "GATE", "Porte d'embarquement")
        localizations.add("de", "gate", "Flugsteig")

        self.assertEqual(localizations.get("fr", "gate"), "Porte d'embarquement")
        self.assertEqual(list(localizations.items("fr")), [("Gate", "Porte d'embarquement")])
        self.assertEqual(localizations.get("de", "GATE"), "Flugsteig")
        self.assertIsNone(localizations.get("es", "gate"))
        self.assertEqual(localizations.languages(), ["fr", "de"])
        self.assertIn("fr", localizations)
        self.assertEqual(len(localizations), 2)

    def test_strings_file(self):
        localizations = Localizations()
        localizations.add("en", "welcome", 'Say "hi"\nthen go')
        localizations.add("en", "gate", "Gate")

        self.assertEqual(
            localizations.to_strings("en"),
            '"welcome" = "Say \\"hi\\"\\nthen go";\n"gate" = "Gate";\n'
        )
        self.assertEqual(localizations.to_strings("xx"), "")


if __name__ == "__main__":
    unittest.main()
