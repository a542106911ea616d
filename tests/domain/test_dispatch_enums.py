import unittest

from dispatchcore.domain._access_type import AccessType
from dispatchcore.domain._call_mode import CallMode


class TestCallMode(unittest.TestCase):
    def test_members(self):
        self.assertEqual([m.name for m in CallMode], ["prim", "bwds", "fwds"])

    def test_canonical_names(self):
        self.assertEqual(CallMode.prim.value, "prim")
        self.assertEqual(CallMode.bwds.value, "bwds")
        self.assertEqual(str(CallMode.fwds), "fwds")

    def test_name_mapping_is_injective(self):
        names = [str(m) for m in CallMode]
        self.assertEqual(len(set(names)), len(names))

    def test_from_name_round_trip(self):
        for m in CallMode:
            with self.subTest(mode=m):
                self.assertIs(CallMode.from_name(str(m)), m)

    def test_from_name_rejects_unknown(self):
        with self.assertRaises(ValueError) as cm:
            CallMode.from_name("backward")
        self.assertIn("'bwds'", str(cm.exception))

    def test_ordinal(self):
        self.assertEqual(CallMode.prim.ordinal, 0)
        self.assertEqual(CallMode.bwds.ordinal, 1)
        self.assertEqual(CallMode.fwds.ordinal, 2)

    def test_identity_and_equality(self):
        self.assertIs(CallMode("bwds"), CallMode.bwds)
        self.assertNotEqual(CallMode.prim, CallMode.fwds)


class TestAccessType(unittest.TestCase):
    def test_members(self):
        self.assertEqual(
            [m.name for m in AccessType], ["none", "read", "write", "readwrite"]
        )

    def test_canonical_names(self):
        for m in AccessType:
            with self.subTest(access=m):
                self.assertEqual(str(m), m.name)
                self.assertEqual(m.value, m.name)

    def test_name_mapping_is_injective(self):
        names = [str(m) for m in AccessType]
        self.assertEqual(len(set(names)), len(names))

    def test_from_name_round_trip(self):
        self.assertIs(AccessType.from_name("readwrite"), AccessType.readwrite)
        self.assertIs(AccessType.from_name("none"), AccessType.none)

    def test_from_name_rejects_unknown(self):
        with self.assertRaises(ValueError):
            AccessType.from_name("READ")

    def test_access_types_are_distinct_from_call_modes(self):
        self.assertNotEqual(AccessType.read, CallMode.prim)


if __name__ == "__main__":
    unittest.main()
