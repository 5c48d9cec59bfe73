import unittest

from asset_store.integrations.storage.paths import compute_extension, compute_path, compute_resource_type


class TestComputePath(unittest.TestCase):

    def test_strips_single_extension(self):
        self.assertEqual(compute_path("a/b/a.jpeg"), "a/b/a")

    def test_keeps_key_without_extension(self):
        self.assertEqual(compute_path("a/b/a"), "a/b/a")
        self.assertEqual(compute_path("abcd"), "abcd")

    def test_strips_only_last_extension(self):
        self.assertEqual(compute_path("abcd.jpg.jpg"), "abcd.jpg")
        self.assertEqual(compute_path("abcd.jpg.png"), "abcd.jpg")

    def test_current_directory_marker_is_dropped(self):
        self.assertEqual(compute_path("./abcd.jpg"), "abcd")

    def test_trailing_separator_is_ignored(self):
        self.assertEqual(compute_path("a/b/"), "a/b")


class TestComputeResourceType(unittest.TestCase):

    def test_known_extensions(self):
        cases = {
            "a/b/a.jpeg": "image",
            "abcd.jpg.mp3": "video",
            "abcd.txt": "raw",
            "abcd.mp4": "video",
            "abcd.xls": "raw",
            "abcd.flv": "video",
            "report.pdf": "raw",
            "mockup.psd": "image",
        }
        for key, expected in cases.items():
            with self.subTest(key=key):
                self.assertEqual(compute_resource_type(key), expected)

    def test_defaults_to_image(self):
        for key in ("a/b/a", "abcd", "abcd.unknownext", "abcd.jpg.jpg"):
            with self.subTest(key=key):
                self.assertEqual(compute_resource_type(key), "image")

    def test_extension_lookup_ignores_case(self):
        self.assertEqual(compute_resource_type("CLIP.MP4"), "video")

    def test_directory_dots_do_not_count_as_extension(self):
        self.assertEqual(compute_resource_type("v1.txt/readme"), "image")

    def test_dotfiles_have_no_extension(self):
        self.assertEqual(compute_extension("a/.mp4"), "")
        self.assertEqual(compute_path("a/.mp4"), "a/.mp4")
        self.assertEqual(compute_resource_type("a/.mp4"), "image")
        self.assertEqual(compute_path(".htaccess"), ".htaccess")
        self.assertEqual(compute_extension("config/.env.json"), "json")


class TestComputeExtension(unittest.TestCase):

    def test_keeps_original_case(self):
        self.assertEqual(compute_extension("docs/Report.PDF"), "PDF")

    def test_only_last_extension(self):
        self.assertEqual(compute_extension("abcd.jpg.png"), "png")

    def test_no_extension(self):
        self.assertEqual(compute_extension("a/b/a"), "")


if __name__ == '__main__':
    unittest.main()
