import os, pdb
import unittest as test

import bagit

import bagreader.access.exceptions as exc

class TestExceptions(test.TestCase):

    def test_hierarchy(self):
        for cls in [exc.MissingTagFile, exc.MalformedVersion,
                    exc.InvalidTagFormat, exc.UnsupportedEncoding,
                    exc.UnsupportedAlgorithm, exc.MaliciousManifest,
                    exc.InvalidManifestFormat, exc.InvalidFetchFormat]:
            self.assertTrue(issubclass(cls, exc.BagReadError))
        self.assertTrue(issubclass(exc.BagReadError, bagit.BagError))

    def test_source(self):
        ex = exc.InvalidTagFormat("bad line")
        self.assertIsNone(ex.source)
        self.assertEqual(str(ex), "bad line")

        ex = exc.InvalidTagFormat("bad line", "/bag/bag-info.txt")
        self.assertEqual(ex.source, "/bag/bag-info.txt")
        self.assertEqual(str(ex), "/bag/bag-info.txt: bad line")

    def test_missing(self):
        ex = exc.MissingTagFile("/bag/bagit.txt")
        self.assertEqual(ex.file, "/bag/bagit.txt")
        self.assertIn("/bag/bagit.txt", str(ex))

        ex = exc.MissingTagFile("/bag/bagit.txt", "Oops")
        self.assertEqual(str(ex), "Oops")

    def test_malicious(self):
        ex = exc.MaliciousManifest("/outside.txt", "/bag", "/bag/manifest-md5.txt")
        self.assertEqual(ex.path, "/outside.txt")
        self.assertEqual(ex.root, "/bag")
        self.assertEqual(ex.source, "/bag/manifest-md5.txt")
        self.assertIn("/outside.txt", str(ex))
        self.assertIn("outside the bag root directory of /bag", str(ex))


if __name__ == '__main__':
    test.main()
