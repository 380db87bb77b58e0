"""Unit tests for gen_aws_sso_config.ui"""
import threading
import unittest
import webbrowser
from unittest.mock import patch

from gen_aws_sso_config import ui


class TestCLIUserInterface(unittest.TestCase):

    def setUp(self):
        self.ui = ui.CLIUserInterface(environ={}, argv=['gen-aws-sso-config', '--strict'])

    def test_args(self):
        self.assertEqual(self.ui.args, ['--strict'])

    @patch('builtins.input', return_value='')
    def test_read_input(self, mock_input):
        self.assertEqual(self.ui.read_input(), '')

    @patch('builtins.input', return_value='done')
    def test_read_input_within_timeout(self, mock_input):
        self.assertEqual(self.ui.read_input(timeout=5), 'done')

    def test_read_input_timeout(self):
        release = threading.Event()
        with patch('builtins.input', side_effect=lambda: release.wait(5) and ''):
            try:
                self.assertRaises(ui.InputTimeout, self.ui.read_input, 0.05)
            finally:
                release.set()

    @patch('builtins.input', side_effect=EOFError)
    def test_read_input_eof_with_timeout(self, mock_input):
        self.assertRaises(EOFError, self.ui.read_input, 5)

    @patch('webbrowser.open', side_effect=webbrowser.Error('no runnable browser'))
    def test_open_url_failure(self, mock_open):
        self.assertFalse(self.ui.open_url('https://device.sso.us-east-1.amazonaws.com/'))

    @patch('webbrowser.open', return_value=True)
    def test_open_url(self, mock_open):
        self.assertTrue(self.ui.open_url('https://device.sso.us-east-1.amazonaws.com/'))
        mock_open.assert_called_once_with('https://device.sso.us-east-1.amazonaws.com/')

    def test_result_goes_to_stdout(self):
        with patch('sys.stdout') as stdout, patch('sys.stderr') as stderr:
            self.ui.result('[sso-session my-sso]')
            self.ui.info('Press ENTER key once login is done')
        self.assertTrue(stdout.write.called)
        written = ''.join(c[0][0] for c in stdout.write.call_args_list)
        self.assertNotIn('Press ENTER', written)
        self.assertIn('Press ENTER', ''.join(c[0][0] for c in stderr.write.call_args_list))

    @patch('builtins.input', return_value='')
    def test_input_prompts_on_stderr(self, mock_input):
        with patch('sys.stdout') as stdout, patch('sys.stderr') as stderr:
            self.assertEqual(self.ui.input('Press ENTER key once login is done', timeout=5), '')
        self.assertEqual(''.join(c[0][0] for c in stderr.write.call_args_list), 'Press ENTER key once login is done')
        self.assertFalse(stdout.write.called)
        mock_input.assert_called_once_with()
