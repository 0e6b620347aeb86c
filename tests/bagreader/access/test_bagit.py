import os, pdb, logging
import tempfile, shutil
import unittest as test

import fs.osfs

import bagreader.access.bagit as bagit
from bagreader.access.exceptions import UnsupportedEncoding
from tests.bagreader.mkbag import mkbag, write_file

class TestPath(test.TestCase):

    def setUp(self):
        self.tempdir = tempfile.mkdtemp()
        self.bagdir = mkbag(os.path.join(self.tempdir, "samplebag"),
                            payload={"trial1.json": "{}", "trial3/trial3a.json": "[]"},
                            tagmanifests={"sha256": ""})
        write_file(os.path.join(self.bagdir, "manifest-goober"), "")
        os.mkdir(os.path.join(self.bagdir, "manifest-dir"))
        self.fs = fs.osfs.OSFS(self.tempdir)
        self.path = bagit.Path(self.fs, "samplebag", "testdata:")

    def tearDown(self):
        self.fs.close()
        shutil.rmtree(self.tempdir)

    def test_ctor(self):
        self.assertIs(self.path.fs, self.fs)
        self.assertEqual(self.path.path, "samplebag")
        self.assertEqual(self.path._pfx, "testdata:")
        self.assertEqual(self.path.name, "samplebag")

    def test_str(self):
        self.assertEqual(str(self.path), "testdata:samplebag")
        self.assertEqual(repr(self.path), repr(self.path.fs)+':samplebag')

    def test_filetests(self):
        path = self.path
        self.assertTrue(path.exists())
        self.assertTrue(path.isdir())
        self.assertFalse(path.isfile())

        path = self.path.relpath("bagit.txt")
        self.assertTrue(path.exists())
        self.assertFalse(path.isdir())
        self.assertTrue(path.isfile())

        path = self.path.relpath("goober")
        self.assertFalse(path.exists())
        self.assertFalse(path.isdir())
        self.assertFalse(path.isfile())

    def test_relpath(self):
        subpath = self.path.relpath("bagit.txt")
        self.assertEqual(str(subpath), "testdata:samplebag/bagit.txt")
        self.assertEqual(subpath.name, "bagit.txt")

        subpath = self.path.relpath("/data/trial1.json")
        self.assertEqual(str(subpath), "testdata:samplebag/data/trial1.json")
        self.assertTrue(subpath.isfile())

        self.assertEqual(str(self.path.relpath("")), "testdata:samplebag")

        root = bagit.Path(self.fs, "", "root:")
        self.assertEqual(root.relpath("samplebag").path, "samplebag")

    def test_files(self):
        self.assertEqual(self.path.files(),
                         ["bagit.txt", "manifest-goober", "manifest-md5.txt",
                          "tagmanifest-sha256.txt"])
        self.assertEqual(self.path.files(["manifest-*"]),
                         ["manifest-goober", "manifest-md5.txt"])
        self.assertEqual(self.path.files(["tagmanifest-*", "manifest-*"]),
                         ["manifest-goober", "manifest-md5.txt",
                          "tagmanifest-sha256.txt"])
        self.assertEqual(self.path.relpath("data/trial3").files(),
                         ["trial3a.json"])

        root = bagit.Path(fs.osfs.OSFS(self.bagdir), "")
        try:
            self.assertEqual(root.files(["bagit*"]), ["bagit.txt"])
        finally:
            root.fs.close()

class TestReadFunctions(test.TestCase):

    def setUp(self):
        self.tempdir = tempfile.mkdtemp()
        self.fs = fs.osfs.OSFS(self.tempdir)

    def tearDown(self):
        self.fs.close()
        shutil.rmtree(self.tempdir)

    def test_open_root(self):
        with bagit.open_root(self.tempdir) as rootfs:
            self.assertTrue(rootfs.isdir("/"))
        with self.assertRaises(OSError):
            bagit.open_root(os.path.join(self.tempdir, "goober"))

    def test_root_path(self):
        path = bagit.root_path(self.fs, self.tempdir)
        self.assertEqual(path.path, "")
        self.assertEqual(str(path), self.tempdir + os.sep)
        self.assertEqual(str(path.relpath("bagit.txt")),
                         os.path.join(self.tempdir, "bagit.txt"))

    def test_read_text_lines(self):
        write_file(os.path.join(self.tempdir, "a.txt"), "one\r\ntwo\nthree")
        path = bagit.Path(self.fs, "a.txt")
        self.assertEqual(bagit.read_text_lines(path), ["one", "two", "three"])

        # plain filepaths work, too
        self.assertEqual(bagit.read_text_lines(os.path.join(self.tempdir, "a.txt")),
                         ["one", "two", "three"])

        write_file(os.path.join(self.tempdir, "empty.txt"), "")
        self.assertEqual(bagit.read_text_lines(bagit.Path(self.fs, "empty.txt")), [])

    def test_read_text_lines_bom(self):
        write_file(os.path.join(self.tempdir, "bom.txt"), "\ufeffone\ntwo\n")
        path = bagit.Path(self.fs, "bom.txt")
        log = logging.getLogger("test.bagit")
        with self.assertLogs(log, logging.WARNING) as cm:
            lines = bagit.read_text_lines(path, logger=log)
        self.assertEqual(lines, ["one", "two"])
        self.assertIn("byte-order mark", cm.output[0])

    def test_read_text_lines_encoding(self):
        write_file(os.path.join(self.tempdir, "latin.txt"), "café\n",
                   encoding="iso-8859-1")
        path = bagit.Path(self.fs, "latin.txt")
        self.assertEqual(bagit.read_text_lines(path, "ISO-8859-1"), ["café"])
        with self.assertRaises(UnicodeDecodeError):
            bagit.read_text_lines(path, "UTF-8")

    def test_check_encoding(self):
        bagit.check_encoding("UTF-8")
        bagit.check_encoding("iso-8859-1")
        with self.assertRaises(UnsupportedEncoding) as cm:
            bagit.check_encoding("goober-8", "bagit.txt")
        self.assertEqual(cm.exception.source, "bagit.txt")
        self.assertIn("goober-8", str(cm.exception))


if __name__ == '__main__':
    test.main()
