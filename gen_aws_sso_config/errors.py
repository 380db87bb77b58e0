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
import sys
from contextlib import contextmanager

from botocore.exceptions import BotoCoreError, ClientError

from . import ui

REMOTE_ERRORS = (BotoCoreError, ClientError)


class GenAwsSsoConfigExitBase(Exception):
    def __init__(self, message, return_code):
        """
        :type message: str
        :type return_code: int
        """
        super().__init__(message, return_code)
        self.message = message
        self.return_code = return_code

    def handle(self, gac_ui=None):
        gac_ui = gac_ui or ui.default
        self.handle_message(gac_ui)
        self.exit()

    def handle_message(self, gac_ui):
        if self.message:
            gac_ui.error(self.message)

    def exit(self):
        sys.exit(self.return_code)


class GenAwsSsoConfigExitError(GenAwsSsoConfigExitBase):
    def __init__(self, message='ERROR', return_code=1):
        super().__init__(message, return_code)


class GenAwsSsoConfigExceptionBase(Exception):
    pass


class GenAwsSsoConfigError(GenAwsSsoConfigExceptionBase, GenAwsSsoConfigExitError):
    pass


class UsageError(GenAwsSsoConfigError):
    def __init__(self, usage):
        super().__init__(usage, 1)


class ConfirmationTimeout(GenAwsSsoConfigError):
    def __init__(self, timeout):
        super().__init__('Timed out after {} seconds waiting for the login to be confirmed.'.format(timeout), 1)


class Interrupted(GenAwsSsoConfigError):
    def __init__(self):
        super().__init__('Interrupted.', 130)


class ErrorPolicy(object):
    """
       Decides what happens when a remote call fails.

       A lenient policy reports the failure and lets the caller carry on with
       an empty result, which is how the tool has always behaved. A strict
       policy turns the first failure into a GenAwsSsoConfigError so the run
       stops there with a non-zero exit code.
    """

    def __init__(self, gac_ui, strict=False):
        """
        :type gac_ui: ui.UserInterface
        :type strict: bool
        """
        self.ui = gac_ui
        self.strict = strict
        self.reported = []

    def report(self, step, exc):
        """ Handle exc raised while performing step """
        message = 'Failed to {}: {}'.format(step, exc)
        if self.strict:
            raise GenAwsSsoConfigError(message) from exc
        self.reported.append(message)
        self.ui.error(message)

    @contextmanager
    def guard(self, step):
        """ Run the block, handing any AWS error it raises to report() """
        try:
            yield
        except REMOTE_ERRORS as exc:
            self.report(step, exc)
