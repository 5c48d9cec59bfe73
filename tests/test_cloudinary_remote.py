import hashlib
import os
import unittest

from asset_store.integrations.storage.cloudinary import CloudinaryAdapter

from tests.fakes import PNG_BYTES

REMOTE_ENV = ("CLOUDINARY_CLOUD_NAME", "CLOUDINARY_API_KEY", "CLOUDINARY_API_SECRET", "CLOUDINARY_CAFILE")


@unittest.skipUnless(
    all(os.getenv(name) for name in REMOTE_ENV),
    "CLOUDINARY_CLOUD_NAME, CLOUDINARY_API_KEY, CLOUDINARY_API_SECRET and CLOUDINARY_CAFILE must be set.",
)
class TestCloudinaryRemote(unittest.TestCase):
    """
    Runs against a real Cloudinary account. Every image in that account is deleted afterwards.
    """

    def setUp(self):
        self.adapter = CloudinaryAdapter(
            os.getenv("CLOUDINARY_CLOUD_NAME"),
            os.getenv("CLOUDINARY_API_KEY"),
            os.getenv("CLOUDINARY_API_SECRET"),
            os.getenv("CLOUDINARY_CAFILE"),
        )

    def tearDown(self):
        for key in self.adapter.keys():
            self.adapter.delete(key)

    def test_write(self):
        self.assertEqual(self.adapter.write("test-image.png", PNG_BYTES), len(PNG_BYTES))

    def test_read(self):
        self.adapter.write("test-image.png", PNG_BYTES)

        content = self.adapter.read("test-image.png")
        self.assertEqual(hashlib.sha1(content).hexdigest(), hashlib.sha1(PNG_BYTES).hexdigest())

    def test_rename(self):
        self.adapter.write("test-image.png", PNG_BYTES)

        self.assertTrue(self.adapter.rename("test-image.png", "rename-image.png"))
        self.assertTrue(self.adapter.exists("rename-image.png"))
        self.assertFalse(self.adapter.exists("test-image.png"))

    def test_keys(self):
        self.adapter.write("test-image.png", PNG_BYTES)

        self.assertEqual(self.adapter.keys(), ["test-image.png"])

    def test_delete(self):
        self.adapter.write("test-image.png", PNG_BYTES)

        self.assertTrue(self.adapter.delete("test-image.png"))
        self.assertFalse(self.adapter.delete("fake-image.png"))

    def test_mtime(self):
        self.adapter.write("test-image.png", PNG_BYTES)

        result = self.adapter.mtime("test-image.png")
        self.assertIsInstance(result, int)
        self.assertGreater(result, 0)


if __name__ == '__main__':
    unittest.main()
