"""
Copyright 2018-present Krzysztof Nazarewski.
Licensed under the Apache License, Version 2.0 (the "License");
You may not use this file except in compliance with the License.
You may obtain a copy of the License at
      http://www.apache.org/licenses/LICENSE-2.0
Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and* limitations under the License.*
"""
import builtins
import os
import sys
import webbrowser
from threading import Thread


class InputTimeout(Exception):
    pass


class UserInterface:
    def __init__(self, environ=os.environ, argv=None):
        if argv is None:
            argv = sys.argv

        self.environ = environ.copy()
        self.argv = argv[:]
        self.args = self.argv[1:]

    def result(self, result):
        """handles output lines, the config text written to stdout
        :type result: str
        """
        raise NotImplementedError()

    def prompt(self, message):
        """handles input's prompt message, but does not ask for input
        :type message: str
        """
        raise NotImplementedError()

    def read_input(self, timeout=None):
        """returns one line of user input

        :param timeout: seconds to wait before raising InputTimeout, None waits forever
        :rtype: str
        """
        raise NotImplementedError()

    def notify(self, message):
        """handles messages meant for user notifications
        :type message: str
        """
        raise NotImplementedError()

    def open_url(self, url):
        """best-effort attempt to show url in a browser
        :type url: str
        :rtype: bool
        """
        raise NotImplementedError()

    def input(self, message=None, timeout=None):
        """handles asking for user input, calls prompt() then read_input()
        :type message: str
        :rtype: str
        """
        self.prompt(message)
        return self.read_input(timeout)

    def info(self, message):
        """handles messages meant for info
        :type message: str
        """
        self.notify(message)

    def warning(self, message):
        """handles messages meant for warnings
        :type message: str
        """
        self.notify(message)

    def error(self, message):
        """handles messages meant for errors
        :type message: str
        """
        self.notify(message)


class CLIUserInterface(UserInterface):
    def result(self, result):
        builtins.print(result, file=sys.stdout)
        sys.stdout.flush()

    def prompt(self, message=None):
        if message is not None:
            builtins.print(message, file=sys.stderr, end='')
            sys.stderr.flush()

    def read_input(self, timeout=None):
        if timeout is None:
            return builtins.input()

        # input() cannot be interrupted, so the reader is left behind as a daemon
        outcome = {}

        def _read():
            try:
                outcome['line'] = builtins.input()
            except EOFError as exc:
                outcome['error'] = exc

        reader = Thread(target=_read, daemon=True)
        reader.start()
        reader.join(timeout)
        if reader.is_alive():
            raise InputTimeout('No input received within {} seconds'.format(timeout))
        if 'error' in outcome:
            raise outcome['error']
        return outcome['line']

    def notify(self, message):
        builtins.print(message, file=sys.stderr)

    def open_url(self, url):
        try:
            return webbrowser.open(url)
        except webbrowser.Error:
            return False


cli = CLIUserInterface()
default = cli
