import io
import os
import tempfile
import unittest
from unittest.mock import patch

from lexisift.errors import ReadFailureError, SourceUnavailableError
from lexisift.source import _iter_lines, read_lines, select_source


class SelectSourceTestCase(unittest.TestCase):
    def test_from_argv(self):
        self.assertEqual(select_source(["lexisift", "input.txt"]), "input.txt")

    @patch("builtins.input", return_value="  notes.txt \n")
    def test_prompt(self, _):
        self.assertEqual(select_source(["lexisift"]), "notes.txt")

    @patch("builtins.input", return_value="")
    def test_prompt_empty(self, _):
        self.assertIsNone(select_source(["lexisift"]))

    @patch("builtins.input", side_effect=EOFError)
    def test_prompt_eof(self, _):
        self.assertIsNone(select_source(["lexisift"]))


class ReadLinesTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)

    def write(self, name, data: bytes):
        path = os.path.join(self.tmpdir.name, name)
        with open(path, "wb") as f:
            f.write(data)
        return path

    def test_lines_without_terminators(self):
        path = self.write("in.txt", "one\r\ntwo 你好\n\nthree".encode("utf-8"))
        self.assertEqual(list(read_lines(path)), ["one", "two 你好", "", "three"])

    def test_empty_file(self):
        path = self.write("empty.txt", b"")
        self.assertEqual(list(read_lines(path)), [])

    def test_no_selection(self):
        with self.assertRaises(SourceUnavailableError):
            read_lines(None)

    def test_missing_file(self):
        with self.assertRaises(SourceUnavailableError):
            read_lines(os.path.join(self.tmpdir.name, "nope.txt"))

    def test_unknown_encoding(self):
        path = self.write("in.txt", b"abc")
        with self.assertRaises(SourceUnavailableError):
            read_lines(path, encoding="no-such-codec")

    def test_undecodable_bytes_are_replaced(self):
        data = "你好 hello\n".encode("utf-8") + b"caf\xe9 world\n"
        path = self.write("bad.txt", data)
        self.assertEqual(list(read_lines(path)), ["你好 hello", "caf\ufffd world"])

    def test_read_error(self):
        class BrokenFile(io.StringIO):
            def __iter__(self):
                raise OSError(5, "Input/output error")

        with self.assertRaises(ReadFailureError):
            list(_iter_lines(BrokenFile(), "broken.txt"))


if __name__ == "__main__":
    unittest.main()
