from __future__ import annotations

import io
import unittest
from unittest.mock import MagicMock, patch

from domain.errors import NetworkError
from interface import cli


class CliTests(unittest.TestCase):
    def test_reads_three_lines_and_prints_result(self) -> None:
        analyzer = MagicMock()
        analyzer.analyze.return_value = [3, 7]
        stdin = io.StringIO("4\r\nDebit\n3-2018\n")
        stdout = io.StringIO()

        with patch("interface.cli.build_analyzer", return_value=analyzer):
            code = cli.main(stdin=stdin, stdout=stdout)

        self.assertEqual(code, 0)
        self.assertEqual(stdout.getvalue(), "[3, 7]\n")
        analyzer.analyze.assert_called_once_with(4, "Debit", "3-2018")

    def test_sentinel_is_printed_as_list(self) -> None:
        analyzer = MagicMock()
        analyzer.analyze.return_value = [-1]
        stdout = io.StringIO()

        with patch("interface.cli.build_analyzer", return_value=analyzer):
            cli.main(stdin=io.StringIO("1\ncredit\n3-2018\n"), stdout=stdout)

        self.assertEqual(stdout.getvalue(), "[-1]\n")

    def test_non_integer_user_id_fails(self) -> None:
        stdout = io.StringIO()

        with patch("interface.cli.build_analyzer") as build, patch("sys.stderr", new_callable=io.StringIO) as stderr:
            code = cli.main(stdin=io.StringIO("abc\ndebit\n3-2018\n"), stdout=stdout)

        self.assertEqual(code, 1)
        self.assertIn("Invalid userId", stderr.getvalue())
        self.assertEqual(stdout.getvalue(), "")
        build.assert_not_called()

    @patch.dict("os.environ", {"TXN_API_TIMEOUT_SECONDS": "soon"}, clear=True)
    def test_invalid_timeout_configuration_exits_non_zero(self) -> None:
        with patch("sys.stderr", new_callable=io.StringIO) as stderr:
            code = cli.main(stdin=io.StringIO("1\ndebit\n3-2018\n"), stdout=io.StringIO())

        self.assertEqual(code, 1)
        self.assertIn("Invalid TXN_API_TIMEOUT_SECONDS", stderr.getvalue())

    def test_analysis_errors_exit_non_zero(self) -> None:
        analyzer = MagicMock()
        analyzer.analyze.side_effect = NetworkError("GET failed: refused")

        with patch("interface.cli.build_analyzer", return_value=analyzer), \
                patch("sys.stderr", new_callable=io.StringIO) as stderr:
            code = cli.main(stdin=io.StringIO("1\ndebit\n3-2018\n"), stdout=io.StringIO())

        self.assertEqual(code, 1)
        self.assertIn("[txn-analyzer] error: GET failed: refused", stderr.getvalue())


if __name__ == "__main__":
    unittest.main()
