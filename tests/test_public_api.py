import unittest

import dispatchcore
from dispatchcore import AccessType, CallContext, CallMode, Device, Shape


class TestPublicApi(unittest.TestCase):
    def test_all_exports_resolve(self):
        for name in dispatchcore.__all__:
            with self.subTest(name=name):
                self.assertTrue(hasattr(dispatchcore, name))

    def test_dispatch_setup_flow(self):
        batch = Shape([8])
        element = Shape([3, 4])
        call_shape = batch + element
        self.assertTrue(call_shape.concrete())
        self.assertEqual(call_shape.element_count(), 96)
        self.assertEqual(call_shape.calc_contiguous_strides(), Shape([12, 4, 1]))

        device = Device("vulkan:0")
        ctx = CallContext(device, call_shape, CallMode.bwds)
        self.assertIs(ctx.device, device)
        self.assertEqual(str(ctx.call_shape), "[8, 3, 4]")
        self.assertEqual(str(ctx.call_mode), "bwds")

        access = {"a": AccessType.read, "result": AccessType.write}
        self.assertEqual(sorted(str(v) for v in access.values()), ["read", "write"])

    def test_invalid_shape_aborts_dispatch_setup(self):
        with self.assertRaises(dispatchcore.InvalidStateError):
            CallContext(Device("cpu"), Shape() + Shape([1]), CallMode.prim)


if __name__ == "__main__":
    unittest.main()
